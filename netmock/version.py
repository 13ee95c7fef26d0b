VERSION = "0.3.0"
NETMOCK = "netmock " + VERSION
