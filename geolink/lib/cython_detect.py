import logging

import cython

from geolink.config import ENV

if cython.compiled:
    logging.info('Cython modules are compiled')
elif ENV == 'prod':
    # require Cython modules to be compiled in production
    raise ImportError('Cython modules are not compiled, run scripts/cython_build.py')
else:
    logging.info('Cython modules are not compiled')
