"""
Log Utils
"""
import logging
import logging.handlers
import os
import structlog
from typing import Optional, Any
from configs.settings import settings

class CustomLogger:
    """structlog logger accepting an optional `error` as second argument"""
    
    def __init__(self, name: str = None):
        self.name = name or __name__
        self._logger = structlog.get_logger(self.name)
    
    def _log(self, level: str, message: str, error: Optional[Any] = None, **kwargs):
        if error is not None:
            kwargs["error"] = str(error)
        getattr(self._logger, level)(message, **kwargs)
    
    def debug(self, message: str, error: Optional[Any] = None, **kwargs):
        """Debug log"""
        self._log("debug", message, error, **kwargs)
    
    def info(self, message: str, error: Optional[Any] = None, **kwargs):
        """Info log"""
        self._log("info", message, error, **kwargs)
    
    def warning(self, message: str, error: Optional[Any] = None, **kwargs):
        """Warning log"""
        self._log("warning", message, error, **kwargs)
    
    def error(self, message: str, error: Optional[Any] = None, **kwargs):
        """Error log, pass exc_info=True to attach the traceback"""
        self._log("error", message, error, **kwargs)
    
    def exception(self, message: str, **kwargs):
        """Exception log (automatically includes stack information)"""
        self._logger.exception(message, **kwargs)

def setup_logging():
    """Setup logging configuration"""
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    
    handlers = []
    
    # File handler
    if settings.log_file:
        log_dir = os.path.dirname(settings.log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            settings.log_file,
            maxBytes=settings.log_max_size,
            backupCount=settings.log_backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(log_level)
        handlers.append(file_handler)
    
    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    handlers.append(console_handler)
    
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )
    
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(key_order=["event", "logger", "level"]),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    
    logging.getLogger(__name__).debug(f"Logging setup completed - Level: {settings.log_level}")

def get_logger(name: str = None) -> CustomLogger:
    """Get custom logger"""
    return CustomLogger(name)

