from setuptools import setup

package_name = 'add_markers'

setup(
    name=package_name,
    version='0.1.0',
    packages=[package_name],
    data_files=[
        ('share/ament_index/resource_index/packages', ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
        ('share/' + package_name + '/launch', [
            'launch/add_markers.launch.py',
        ]),
    ],
    install_requires=['setuptools', 'numpy', 'tf-transformations', 'transforms3d'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    maintainer='Your Name',
    maintainer_email='you@example.com',
    description='Pickup and drop off marker for the home service robot',
    license='MIT',
    tests_require=['pytest'],
    entry_points={
        'console_scripts': [
            'add_markers = add_markers.add_markers_node:main',
        ],
    },
)
