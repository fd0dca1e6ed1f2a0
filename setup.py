"""
facetrack - Multi-Face Tracking
Stable identities, colors and motion for per-frame face detections
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

setup(
    name="facetrack",
    version="0.1.0",
    description="Greedy nearest-neighbor face tracker with identity colors and count hysteresis",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["facetrack", "facetrack.*"]),
    python_requires=">=3.10",
    install_requires=[
        # Computer Vision
        "opencv-python>=4.7.0",

        # CLI/UI
        "rich>=14.1.0",

        # Utilities
        "numpy>=1.26.4",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "black>=23.0.0",
            "ruff>=0.13.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "facetrack=facetrack.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Image Recognition",
        "Topic :: Multimedia :: Video",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
