"""
The MODEL layer contains pure data structures and the merge/placement logic.
It has NO knowledge of the GUI (Qt).
It deals with Geometry, Colors and the rules of the Field.
"""
