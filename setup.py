# setup.py
from setuptools import setup, find_packages

setup(
    name="raycast3d",
    version="1.0.0",
    description="Ray cast picking demo on a small numpy scene-graph engine",
    packages=find_packages(include=["raycast3d", "raycast3d.*",
                                    "raycast_app", "raycast_app.*"]),
    install_requires=[
        "numpy>=1.20.0",
        "PyOpenGL>=3.1.5",
        "PySide6>=6.4.0",
        "numba>=0.55.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    package_data={
        'raycast_app': ['assets/*.obj'],
    },
    entry_points={
        "console_scripts": [
            "raycast-demo=raycast_app.main:run",
        ],
    },
)
