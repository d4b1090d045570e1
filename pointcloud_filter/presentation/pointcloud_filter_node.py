# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

import logging
import threading

import rclpy
from rclpy.node import Node
from rclpy.parameter import Parameter
from rclpy.qos import QoSProfile, QoSHistoryPolicy, QoSReliabilityPolicy
from rcl_interfaces.msg import ParameterDescriptor, SetParametersResult
from sensor_msgs.msg import PointCloud2

from ..domain.entities import FilterConfig
from ..application.services import FilterPipeline, CloudFilterService
from ..application.utils import FrameMailbox
from ..infrastructure.ros2 import ROS2CloudDecoder, ROS2CloudPublisher
from .parameters import CONFIG_PARAMETERS, STARTUP_PARAMETERS, config_changes

logging.basicConfig(level=logging.WARN)
logging.getLogger('pointcloud_filter').setLevel(logging.INFO)
logger = logging.getLogger(__name__)


class PointCloudFilterNode(Node):
    """Crop, voxelize and outlier-filter incoming point clouds"""

    def __init__(self):
        super().__init__('pointcloud_filter')

        # Configuration initialization
        self._declare_parameters()
        self.config = self._load_configuration()

        self.pipeline = FilterPipeline(self.config)
        self.mailbox: FrameMailbox[PointCloud2] = FrameMailbox()

        # Publishers and service
        self._setup_publishers()
        self.cloud_publisher = ROS2CloudPublisher(
            node=self,
            downsampled_pub=self.downsampled_pub,
            filtered_pub=self.filtered_pub
        )
        self.filter_service = CloudFilterService(
            pipeline=self.pipeline,
            decoder=ROS2CloudDecoder(),
            publisher=self.cloud_publisher
        )

        self._setup_subscriptions()
        self.add_on_set_parameters_callback(self._on_set_parameters)

        # Processing worker, one frame in flight at a time
        self._worker = threading.Thread(
            target=self._processing_loop, name='pointcloud_filter_worker', daemon=True)
        self._worker.start()

        self._log_configuration()

    def _declare_parameters(self) -> None:
        """Declare all node parameters"""
        defaults = FilterConfig()
        read_only = ParameterDescriptor(read_only=True)
        self.declare_parameters(
            namespace='',
            parameters=[
                (name, value, read_only)
                for name, value in STARTUP_PARAMETERS.items()
            ] + [
                (name, getattr(defaults, field))
                for name, field in CONFIG_PARAMETERS.items()
            ]
        )

    def _load_configuration(self) -> FilterConfig:
        """Load filter configuration from parameters"""
        return FilterConfig.from_params(**{
            field: self.get_parameter(name).value
            for name, field in CONFIG_PARAMETERS.items()
        })

    def _setup_publishers(self) -> None:
        """Setup publishers for processed clouds"""
        depth = self.get_parameter('publisher_depth').get_parameter_value().integer_value

        self.filtered_pub = self.create_publisher(
            PointCloud2,
            self.get_parameter('filtered_topic').get_parameter_value().string_value,
            depth
        )
        self.downsampled_pub = self.create_publisher(
            PointCloud2,
            self.get_parameter('downsampled_topic').get_parameter_value().string_value,
            depth
        )

    def _setup_subscriptions(self) -> None:
        """Setup raw cloud subscription, newest frame only"""
        qos_profile = QoSProfile(
            reliability=QoSReliabilityPolicy.RELIABLE,
            history=QoSHistoryPolicy.KEEP_LAST,
            depth=1
        )
        self.subscription = self.create_subscription(
            PointCloud2,
            self.get_parameter('input_topic').get_parameter_value().string_value,
            self._pointcloud_callback,
            qos_profile
        )

    def _pointcloud_callback(self, msg: PointCloud2) -> None:
        """Hand the frame to the worker, replacing any frame still waiting"""
        self.mailbox.put(msg)

    def _processing_loop(self) -> None:
        """Worker loop draining the mailbox"""
        while not self.mailbox.closed:
            msg = self.mailbox.take(timeout=0.5)
            if msg is None:
                continue
            try:
                self.filter_service.handle_message(msg)
            except Exception as e:
                self.get_logger().error(f"Error processing point cloud: {e}")

    def _on_set_parameters(self, params) -> SetParametersResult:
        """Hot reload of filter parameters, start-up parameters are refused"""
        updates = {p.name: p.value for p in params if p.type_ != Parameter.Type.NOT_SET}
        try:
            changes = config_changes(updates)
            if not changes:
                return SetParametersResult(successful=True)
            new_config = self.pipeline.config.replace(**changes)
        except ValueError as e:
            self.get_logger().warning(f"Rejected parameter update: {e}")
            return SetParametersResult(successful=False, reason=str(e))

        self.pipeline.update_config(new_config)
        self.config = new_config
        self.get_logger().info(f"Filter parameters updated: {changes}")
        return SetParametersResult(successful=True, reason='Updated filter parameters')

    def _log_configuration(self) -> None:
        """Log current configuration"""
        config = self.config
        self.get_logger().info("🧹 PointCloud Filter Configuration:")
        self.get_logger().info(
            f"   Crop box: x[{config.x_min:.2f}, {config.x_max:.2f}] "
            f"y[{config.y_min:.2f}, {config.y_max:.2f}] "
            f"z[{config.z_min:.2f}, {config.z_max:.2f}]")
        self.get_logger().info(f"   Voxel leaf size: {config.leaf_size}m")
        self.get_logger().info(
            f"   Outlier filter: k={config.mean_k}, stddev x{config.stddev_multiplier}, "
            f"workers={config.workers}")
        self.get_logger().info(f"   Input: {self.subscription.topic_name}")
        self.get_logger().info(
            f"   Outputs: {self.downsampled_pub.topic_name}, {self.filtered_pub.topic_name}")

    def destroy_node(self):
        self.mailbox.close()
        self._worker.join(timeout=2.0)
        if self.mailbox.dropped_count:
            self.get_logger().info(f"Dropped {self.mailbox.dropped_count} stale frames")
        return super().destroy_node()


def main(args=None):
    """Main entry point"""
    rclpy.init(args=args)

    node = None
    try:
        node = PointCloudFilterNode()
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.error(f"Error running pointcloud filter: {e}")
    finally:
        if node is not None:
            node.destroy_node()
        rclpy.try_shutdown()


if __name__ == '__main__':
    main()
