"""
The VIEW layer renders the field with PySide6 and reports user input to the
FieldController. It holds no rules of its own.
"""
