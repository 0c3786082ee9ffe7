"""
Logging Configuration
Structured logging for render traces, with sensitive data redaction
"""
import logging
import logging.handlers
import json
import re
from typing import Dict, List, Optional, TextIO
from datetime import datetime


class SensitiveDataFilter(logging.Filter):
    """
    Filter to redact sensitive data from logs

    Render failures log the whole view context, which may hold passwords,
    tokens or API keys. Redaction covers both JSON dumps and key=value text.
    """

    SENSITIVE_FIELDS = (
        'password', 'passwd', 'pwd', 'password_hash', 'password_confirmation',
        'api_key', 'api_secret', 'token', 'access_token', 'refresh_token',
        'bearer_token', 'jwt', 'secret', 'secret_key', 'csrf_token',
    )

    SENSITIVE_PATTERNS = {
        # Authorization headers
        'auth_header': (
            r'(Authorization:\s+Bearer\s+)[A-Za-z0-9\-_=]+\.[A-Za-z0-9\-_=]+\.?[A-Za-z0-9\-_.+/=]*',
            r'\1[REDACTED]',
        ),
        # Credit card numbers (basic pattern)
        'credit_card': (r'\b\d{4}[\s-]?\d{4}[\s-]?\d{4}[\s-]?(\d{4})\b', r'****-****-****-\1'),
        # Private keys
        'private_key': (
            r'-----BEGIN\s+(?:RSA\s+)?PRIVATE\s+KEY-----[\s\S]+?-----END\s+(?:RSA\s+)?PRIVATE\s+KEY-----',
            '[REDACTED PRIVATE KEY]',
        ),
    }

    def __init__(self, additional_fields: Optional[List[str]] = None):
        """
        Initialize sensitive data filter

        Args:
            additional_fields: Extra context keys whose values must be redacted
        """
        super().__init__()
        names = list(self.SENSITIVE_FIELDS) + list(additional_fields or [])
        alternation = '|'.join(re.escape(name) for name in names)

        # "password": "..." in JSON dumps, password=... in text
        self.json_field = re.compile(rf'("(?:{alternation})"\s*:\s*)"[^"]*"', re.IGNORECASE)
        self.text_field = re.compile(rf'\b((?:{alternation})=)[^&\s,]+', re.IGNORECASE)
        self.compiled_patterns = {
            name: (re.compile(pattern, re.IGNORECASE), replacement)
            for name, (pattern, replacement) in self.SENSITIVE_PATTERNS.items()
        }

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Redact sensitive data in the record

        Returns:
            True (always pass the record, but with redacted content)
        """
        if isinstance(record.msg, str):
            record.msg = self.redact(record.msg)

        if record.args:
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
        redacted = self.json_field.sub(r'\1"[REDACTED]"', text)
        redacted = self.text_field.sub(r'\1[REDACTED]', redacted)
        for pattern, replacement in self.compiled_patterns.values():
            redacted = pattern.sub(replacement, redacted)
        return redacted


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging

    Fields passed through ``extra=`` (view, extension, ...) are emitted as
    top-level keys.
    """

    RESERVED = frozenset([
        'name', 'msg', 'args', 'created', 'filename', 'funcName',
        'levelname', 'levelno', 'lineno', 'module', 'msecs',
        'pathname', 'process', 'processName', 'relativeCreated',
        'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
        'getMessage', 'message', 'taskName',
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

        if record.stack_info:
            log_data['stack'] = record.stack_info

        for key, value in record.__dict__.items():
            if key not in self.RESERVED:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class LoggerConfig:
    """
    Centralized logging configuration
    """

    TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    @staticmethod
    def setup_logger(
        name: str = 'renderlayout',
        format_type: str = 'json',
        level: Optional[int] = None,
        environment: str = 'production',
        stream: Optional[TextIO] = None,
        file_name: Optional[str] = None,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
        filter_sensitive: bool = True,
        additional_sensitive_fields: Optional[List[str]] = None
    ) -> logging.Logger:
        """
        Setup a logger with console and optional rotating file output

        Args:
            name: Logger name
            format_type: Format type ('json' or 'text')
            level: Explicit level, otherwise derived from environment
            environment: Environment name used to derive the level
            stream: Console stream (stderr when omitted)
            file_name: Log file path, enables a rotating file handler
            max_bytes: Max bytes before rotation
            backup_count: Number of backup files to keep
            filter_sensitive: Enable sensitive data filtering
            additional_sensitive_fields: Additional context keys to redact

        Returns:
            Configured logger

        Example:
            logger = LoggerConfig.setup_logger('renderlayout', format_type='text')
        """
        if level is None:
            level = LoggerConfig.get_level_by_environment(environment)

        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Clear existing handlers
        logger.handlers.clear()

        if format_type == 'json':
            formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(LoggerConfig.TEXT_FORMAT)

        handlers: List[logging.Handler] = [logging.StreamHandler(stream)]
        if file_name:
            handlers.append(logging.handlers.RotatingFileHandler(
                file_name,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            ))

        sensitive_filter = SensitiveDataFilter(additional_sensitive_fields) if filter_sensitive else None
        for handler in handlers:
            handler.setFormatter(formatter)
            if sensitive_filter:
                handler.addFilter(sensitive_filter)
            logger.addHandler(handler)

        # Prevent propagation to avoid duplicate logs
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
        levels: Dict[str, int] = {
            'production': logging.WARNING,
            'staging': logging.INFO,
            'development': logging.DEBUG,
            'testing': logging.ERROR,
        }
        return levels.get(environment.lower(), logging.INFO)
