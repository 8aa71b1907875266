APP_NAME = "loadconf"
ENV_PREFIX = "LOADCONF_"

DEFAULT_SYSTEM_CONFIG_DIR = "/etc/.config"
CONFIG_FILE_SUFFIX = ".toml"
