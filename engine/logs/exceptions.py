# engine/logs/exceptions.py

class LogAnalysisError(Exception):
    pass


class LogDecodeError(LogAnalysisError, ValueError):
    pass
