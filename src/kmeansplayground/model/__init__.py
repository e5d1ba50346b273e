"""
The MODEL layer contains pure data structures and the clustering logic.
It has NO knowledge of the GUI (Qt).
It deals with Geometry, the k-means iteration and the session state.
"""
