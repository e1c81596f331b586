DEFAULT_FORMAT = "{time} | {level} | {name} | {message}"

SIMPLE_FORMAT = "{level}: {message}"

DETAILED_FORMAT = "{time} | {level} | {name} | {message} | Thread: {thread} | Process: {process}"


class LogFormat:
    DEFAULT = DEFAULT_FORMAT
    SIMPLE = SIMPLE_FORMAT
    DETAILED = DETAILED_FORMAT
