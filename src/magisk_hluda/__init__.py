"""
magisk-hluda: package florida-server binaries into a Magisk module.
"""
