from planeviz.common.errors import PlaneWarning

import warnings

class LoggingManager():
    """Process wide switch for the library's warnings. Silent unless verbose."""

    __create_key = object()
    __instance = None

    def __init__(self, create_key):
        assert(create_key == LoggingManager.__create_key), \
            "LoggingManager objects must be created using LoggingManager.instance"

        self.verbose = False

    @classmethod
    def instance(cls):
        if cls.__instance is None:
            cls.__instance = LoggingManager(cls.__create_key)
        return cls.__instance

    def set_verbosity(self, is_verbose:bool):
        self.verbose = is_verbose

    def warning(self, msg:str, category = PlaneWarning):
        if self.verbose is True:
            # stacklevel 3 points at the caller of the library function
            warnings.warn(msg, category, stacklevel = 3)
