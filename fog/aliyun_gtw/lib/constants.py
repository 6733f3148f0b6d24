"""
  File with all constants in project
"""
# Fog downlink topics (source convention)
FOG_TOPIC_THING_MODEL_PROP_SET = "fog/+/+/thing/down/property/set"
FOG_TOPIC_THING_MODEL_SVC_REQ = "fog/+/+/thing/down/service/+"
# Aliyun IoT downlink topics (destination convention)
ALIYUN_TOPIC_THING_MODEL_PROP_SET = "/sys/+/+/thing/service/property/set"
ALIYUN_TOPIC_THING_MODEL_SVC_REQ = "/sys/+/+/thing/service/+"

# Registration order matters: first registered template wins on a tie
DOWNLINK_TOPIC_TEMPLATES = (
    FOG_TOPIC_THING_MODEL_PROP_SET,
    FOG_TOPIC_THING_MODEL_SVC_REQ,
    ALIYUN_TOPIC_THING_MODEL_PROP_SET,
    ALIYUN_TOPIC_THING_MODEL_SVC_REQ,
)

TOPIC_SEPARATOR = "/"
TOPIC_WILDCARD = "+"
USERNAME_SEPARATOR = "&"

# Aliyun alink method names
ALIYUN_METHOD_PROP_SET = "thing.service.property.set"
ALIYUN_METHOD_SVC_PREFIX = "thing.service."
ALIYUN_ENVELOPE_VERSION = "1.0"

# Configuration
CONFIG_PATH = "/etc/fog-aliyun-gtw.conf"
CONFIG_PATH_ENV = "FOG_ALIYUN_GTW_CONFIG"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"
# For logging to syslog/journald with name "fog-aliyun-gtw-cli"
FOG_ALIYUN_GTW_CLI_LOGGER_NAME = "fog-aliyun-gtw-cli"
