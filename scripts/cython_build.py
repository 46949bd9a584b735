import os
from pathlib import Path

from Cython.Build import cythonize
from Cython.Compiler import Options
from setuptools import Extension, setup

import geolink.config  # DO NOT REMOVE  # noqa: F401
from geolink.lib.pydantic_settings_integration import pydantic_settings_integration

CYTHON_MARCH = 'native'
CYTHON_MTUNE = 'native'
CYTHON_FLAGS = ''

pydantic_settings_integration(__name__, globals())

Options.docstrings = False
Options.annotate = True

dirs = (
    'geolink/lib',
    'geolink/parsers',
)

blacklist: dict[str, set[str]] = {
    'geolink/lib': {
        # Reason: builds the settings model from module annotations at import time
        'pydantic_settings_integration.py',
    },
}

paths = [
    p
    for dir_ in dirs
    for p in Path(dir_).rglob('*.py')
    if p.name not in blacklist.get(p.parent.as_posix(), set())
]

extra_args: list[str] = [
    '-g',
    '-O3',
    '-pipe',
    f'-march={CYTHON_MARCH}',
    f'-mtune={CYTHON_MTUNE}',
    '-fno-semantic-interposition',
    '-fno-plt',
    '-fvisibility=hidden',
    *CYTHON_FLAGS.split(),
]

# usage: python scripts/cython_build.py build_ext --inplace
setup(
    ext_modules=cythonize(
        [
            Extension(
                path.with_suffix('').as_posix().replace('/', '.'),
                [str(path)],
                extra_compile_args=extra_args,
                extra_link_args=extra_args,
            )
            for path in paths
        ],
        nthreads=os.cpu_count() or 1,
        compiler_directives={
            # https://cython.readthedocs.io/en/latest/src/userguide/source_files_and_compilation.html#compiler-directives
            'overflowcheck': True,
            'embedsignature': True,
            'language_level': 3,
        },
    ),
)
