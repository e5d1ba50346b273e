"""
K-Means Playground
==================
An interactive canvas for watching k-means clustering converge.

Click to place points, step the algorithm by hand or let it run, and watch
the centroids glide towards the means of their clusters.
"""
__version__ = "0.1.0"
