class LoggingInfrastructureError(Exception):
    pass


class LogFileError(LoggingInfrastructureError, OSError):
    pass


class LogFileOpenError(LogFileError):
    pass
