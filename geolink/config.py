from logging.config import dictConfig
from typing import Annotated, Literal

from githead import githead
from pydantic import Field

from geolink.lib.pydantic_settings_integration import pydantic_settings_integration

type _Prefix = Annotated[str, Field(min_length=1)]

# -------------------- System Configuration --------------------

# Core settings
ENV: Literal['dev', 'test', 'prod'] = 'dev'
LOG_LEVEL: Literal['DEBUG', 'INFO', 'WARNING'] | None = None

# -------------------- Coordinate Parsing --------------------

# Number of fractional digits kept by the Ge0 decoder
GEO_COORDINATE_PRECISION: int = Field(5, ge=0, le=12)

# Ge0 link prefixes, matched exactly and in order
GE0_LINK_PREFIXES: tuple[_Prefix, ...] = Field(
    (
        'om://',
        'ge0://',
        'https://omaps.app/',
        'https://comaps.at/',
    ),
    min_length=1,
)

pydantic_settings_integration(__name__, globals())

# -------------------- Constant or derived configuration --------------------

try:
    VERSION = 'git#' + githead()[:7]
except FileNotFoundError:
    VERSION = 'dev'  # pyright: ignore [reportConstantRedefinition]

NAME = 'geolink'

if LOG_LEVEL is None:
    LOG_LEVEL = 'INFO' if ENV == 'prod' else 'DEBUG'  # pyright: ignore[reportConstantRedefinition]

# -------------------- Logging configuration --------------------

dictConfig({
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            'format': '%(levelname)s | %(asctime)s | %(name)s %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },
    'handlers': {
        'default': {
            'formatter': 'default',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stderr',
        },
    },
    'loggers': {
        'root': {'handlers': ['default'], 'level': LOG_LEVEL},
    },
})
