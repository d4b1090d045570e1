"""
Infrastructure layer - adapters for external systems

ROS2 adapters live in the ros2 subpackage and are imported explicitly,
so the domain and application layers stay usable without rclpy.
"""
