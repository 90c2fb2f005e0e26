from launch import LaunchDescription
from launch_ros.actions import Node
from launch.actions import DeclareLaunchArgument
from launch.substitutions import LaunchConfiguration


def generate_launch_description():
    """
    Pickup / drop off marker - run alongside the navigation driver and RViz
    """

    goal_topic = LaunchConfiguration('goal_topic', default='target')
    odom_topic = LaunchConfiguration('odom_topic', default='odom')
    marker_topic = LaunchConfiguration('marker_topic', default='visualization_marker')

    declare_goal_topic = DeclareLaunchArgument(
        'goal_topic',
        default_value='target',
        description='Goal announcements from the navigation driver'
    )
    declare_odom_topic = DeclareLaunchArgument(
        'odom_topic',
        default_value='odom',
        description='Robot odometry'
    )
    declare_marker_topic = DeclareLaunchArgument(
        'marker_topic',
        default_value='visualization_marker',
        description='Where the marker is published for RViz'
    )

    add_markers_node = Node(
        package='add_markers',
        executable='add_markers',
        name='add_markers',
        parameters=[{
            'goal_topic': goal_topic,
            'odom_topic': odom_topic,
            'marker_topic': marker_topic,
        }],
        output='screen'
    )

    return LaunchDescription([
        declare_goal_topic,
        declare_odom_topic,
        declare_marker_topic,
        add_markers_node
    ])
