"""nephele - command-line client for the AWS management APIs"""

__version__ = "0.4.0"
