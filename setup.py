"""
Setup script for Hostname Menu.

Usage:
    python setup.py py2app     # build the macOS application bundle
    pip install -e ".[test]"   # development install with test tools

The resulting app will be in the 'dist' folder.
"""
from setuptools import find_packages, setup

APP = ['hostname_menu.py']
DATA_FILES = []

OPTIONS = {
    'argv_emulation': False,
    'plist': {
        'CFBundleName': 'Hostname Menu',
        'CFBundleDisplayName': 'Hostname Menu',
        'CFBundleIdentifier': 'com.hostname-menu',
        'CFBundleVersion': '1.0.0',
        'CFBundleShortVersionString': '1.0.0',
        'LSMinimumSystemVersion': '10.14.0',
        'LSUIElement': True,  # Hide dock icon (menu bar app)
        'NSHighResolutionCapable': True,
    },
    'packages': [
        # Our packages
        'app',
        'config',
        'hostinfo',
        'storage',
    ],
    'includes': [
        'rumps',
        'psutil',
        'PIL',
        'PIL.Image',
        'PIL.ImageDraw',
        'objc',
        'Foundation',
        'AppKit',
    ],
    'excludes': [
        'tkinter',
        'pytest',
        'pip',
        'PyObjCTools',
    ],
    'site_packages': True,
}

setup(
    app=APP,
    name='hostname-menu',
    version='1.0.0',
    description='macOS menu bar app showing the computer name, local hostname or an IP address',
    packages=find_packages(exclude=['tests', 'tests.*']),
    py_modules=['hostname_menu'],
    python_requires='>=3.9',
    install_requires=[
        'rumps; sys_platform == "darwin"',
        'pyobjc-framework-Cocoa; sys_platform == "darwin"',
        'psutil',
        'Pillow',
    ],
    extras_require={
        'test': ['pytest'],
        'app': ['py2app'],
    },
    entry_points={
        'gui_scripts': ['hostname-menu = hostname_menu:main'],
    },
    data_files=DATA_FILES,
    options={'py2app': OPTIONS},
)
