"""
colorkey/util
~~~~~~~~~~~~~
"""
