"""
Indieboxer - dodge the lane traffic and deliver boxes to the goal.
"""
__version__ = "0.1.0"
