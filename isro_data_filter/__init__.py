"""ISRO Data Filter.

Lets a user define an area of interest (typed coordinates or a polygon
drawn on the map), select one or more lunar data products, query a WFS
feature service with a spatial filter, and load the GeoJSON result as a
new catalog layer.
"""

__version__ = "0.1.0"
