"""
Logging Configuration
Structured logging with credential redaction for request data
"""
import logging
import logging.handlers
import json
import re
from pathlib import Path
from typing import Dict, List, Optional, Union
from datetime import datetime
from urllib.parse import unquote_plus


class SensitiveDataFilter(logging.Filter):
    """
    Filter to redact credentials from log records

    Query strings end up in logs verbatim, so besides JSON fields this also
    redacts values of credential-like query parameters.
    """

    SENSITIVE_FIELDS = (
        'password', 'passwd', 'pwd', 'token', 'access_token',
        'refresh_token', 'api_key', 'api_secret', 'secret', 'secret_key',
    )

    def __init__(self, additional_fields: Optional[List[str]] = None):
        """
        Initialize sensitive data filter

        Args:
            additional_fields: Extra field names to redact
        """
        super().__init__()
        fields = list(self.SENSITIVE_FIELDS) + list(additional_fields or [])
        names = '|'.join(re.escape(field) for field in fields)
        self.query_fields = frozenset(field.lower() for field in fields)

        # "password": "..." inside JSON payloads
        self.json_pattern = re.compile(rf'("(?:{names})"\s*:\s*)"[^"]*"', re.IGNORECASE)
        # name=value pairs inside query strings; names are matched after percent-decoding
        self.query_pattern = re.compile(r'((?:^|[?&\s])([^=&\s?]+)=)([^&\s]*)')

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Redact sensitive data in place

        Returns:
            True (always pass the record, but with redacted content)
        """
        if isinstance(record.msg, str):
            record.msg = self.redact(record.msg)

        if isinstance(record.args, dict):
            record.args = {
                k: self.redact(v) if isinstance(v, str) else v
                for k, v in record.args.items()
            }
        elif isinstance(record.args, tuple):
            record.args = tuple(
                self.redact(arg) if isinstance(arg, str) else arg
                for arg in record.args
            )

        return True

    def redact(self, text: str) -> str:
        """Return text with credential values replaced by [REDACTED]"""
        text = self.json_pattern.sub(r'\1"[REDACTED]"', text)
        return self.query_pattern.sub(self._redact_query_pair, text)

    def _redact_query_pair(self, match: re.Match) -> str:
        name = unquote_plus(match.group(2)).lower()
        if name.endswith('[]'):
            name = name[:-2]

        if name in self.query_fields:
            return match.group(1) + '[REDACTED]'

        # values such as next=/login?token=... can carry a query string of their own
        return match.group(1) + self.query_pattern.sub(self._redact_query_pair, match.group(3))


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging
    """

    RESERVED_ATTRS = frozenset([
        'name', 'msg', 'args', 'created', 'filename', 'funcName',
        'levelname', 'levelno', 'lineno', 'module', 'msecs',
        'pathname', 'process', 'processName', 'relativeCreated',
        'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
        'message', 'taskName',
    ])

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        # Fields passed through extra={...}
        for key, value in record.__dict__.items():
            if key not in self.RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class LoggerConfig:
    """
    Centralized logging configuration
    """

    @staticmethod
    def setup_logger(
        name: str,
        format_type: str = 'json',
        log_file: Optional[Union[str, Path]] = None,
        max_bytes: int = None,
        backup_count: int = None,
        filter_sensitive: bool = True,
        additional_sensitive_fields: Optional[List[str]] = None,
    ) -> logging.Logger:
        """
        Setup a logger with optional rotation and sensitive data filtering

        Args:
            name: Logger name
            format_type: Format type ('json' or 'text')
            log_file: Write to this file (rotating) instead of stderr
            max_bytes: Max bytes before rotation
            backup_count: Number of backup files to keep
            filter_sensitive: Enable sensitive data filtering
            additional_sensitive_fields: Extra field names to redact

        Returns:
            Configured logger

        Example:
            logger = LoggerConfig.setup_logger('zancommon', format_type='text')
        """
        from zancommon.defaults import DEFAULT_LOG_MAX_BYTES, DEFAULT_LOG_BACKUP_COUNT
        from zancommon.support import Config

        if max_bytes is None:
            max_bytes = DEFAULT_LOG_MAX_BYTES
        if backup_count is None:
            backup_count = DEFAULT_LOG_BACKUP_COUNT

        logger = logging.getLogger(name)
        logger.setLevel(LoggerConfig.get_level_by_environment(Config.get('app.APP_ENV', 'local')))
        logger.handlers.clear()

        if log_file is not None:
            log_file = Path(log_file)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
        else:
            handler = logging.StreamHandler()

        if format_type == 'json':
            handler.setFormatter(JSONFormatter())
        else:
            handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))

        if filter_sensitive:
            handler.addFilter(SensitiveDataFilter(additional_sensitive_fields))

        logger.addHandler(handler)
        logger.propagate = False

        return logger

    @staticmethod
    def get_level_by_environment(environment: str) -> int:
        """
        Get logging level based on environment

        Args:
            environment: Environment name ('production', 'development', 'testing')

        Returns:
            Logging level
        """
        levels = {
            'production': logging.WARNING,
            'staging': logging.INFO,
            'development': logging.DEBUG,
            'testing': logging.ERROR,
        }
        return levels.get(environment.lower(), logging.INFO)
