"""
utils package
~~~~~~~~~~~~~
Scanning, decoding, theming and path helpers shared by the controller and views.
"""
