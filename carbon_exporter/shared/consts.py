from enum import Enum, IntEnum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnumExitCode(IntEnum):
    SUCCESS = 0
    UNEXPECTED_ERROR = 1
    # argparse exits with 2 on a bad command line
    USAGE_ERROR = 2
    INVALID_LOCATION = 3
    FETCH_FAILURE = 4
    PARSE_FAILURE = 5
    STORE_FAILURE = 6


DOCUMENTATION_URL = "https://github.com/bluehands/Carbon-Aware-Computing"
LOCATIONS_URL = "https://forecast.carbon-aware-computing.com/locations"
