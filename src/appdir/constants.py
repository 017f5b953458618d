APP_NAME = "appdir"
VERSION = "0.1.0"
