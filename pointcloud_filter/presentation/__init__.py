"""
Presentation layer - ROS2 nodes
"""
