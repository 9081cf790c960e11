import json
import logging
import sys
import traceback
from dataclasses import asdict, dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from domain.exceptions.rates import ConfigurationError

API_LOGGER_NAME = 'rates.api'


class CustomJSONEncoder(json.JSONEncoder):
	def default(self, o):
		if isinstance(o, datetime):
			return o.isoformat()
		if isinstance(o, Decimal):
			return str(o)
		return super().default(o)


class JSONFormatter(logging.Formatter):
	"""
	Formatter that outputs one structured JSON object per record.
	"""

	def format(self, record: logging.LogRecord) -> str:
		log_entry = {
			'timestamp': datetime.fromtimestamp(record.created).isoformat(),
			'level': record.levelname,
			'logger': record.name,
			'message': record.getMessage(),
			'module': record.module,
			'function': record.funcName,
			'line': record.lineno,
		}

		if record.exc_info:
			log_entry['exception'] = {
				'type': record.exc_info[0].__name__,
				'message': str(record.exc_info[1]),
				'traceback': traceback.format_exception(*record.exc_info),
			}

		if hasattr(record, 'extra_data'):
			log_entry['data'] = record.extra_data

		return json.dumps(log_entry, ensure_ascii=False, cls=CustomJSONEncoder)


def configure_logging(
	level: str = 'INFO',
	json_output: bool = False,
	log_file: str | None = None,
	max_file_size: int = 10 * 1024 * 1024,
	backup_count: int = 5,
) -> None:
	"""
	Install console logging (plain or JSON) on stderr and, when ``log_file``
	is given, a rotating JSON file handler that records everything at DEBUG.
	"""
	console_level = logging.getLevelName(level.upper())
	if not isinstance(console_level, int):
		raise ConfigurationError(f'Unknown log level: {level!r}')

	root_logger = logging.getLogger()
	root_logger.setLevel(logging.DEBUG)

	logging.getLogger('httpx').setLevel(logging.WARNING)
	logging.getLogger('httpcore').setLevel(logging.WARNING)

	for handler in root_logger.handlers[:]:
		root_logger.removeHandler(handler)
		handler.close()

	console_handler = logging.StreamHandler(sys.stderr)
	console_handler.setLevel(console_level)
	if json_output:
		console_handler.setFormatter(JSONFormatter())
	else:
		console_format = '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s'
		console_handler.setFormatter(logging.Formatter(console_format, datefmt='%H:%M:%S'))
	root_logger.addHandler(console_handler)

	if log_file:
		path = Path(log_file)
		path.parent.mkdir(parents=True, exist_ok=True)
		file_handler = RotatingFileHandler(
			path,
			maxBytes=max_file_size,
			backupCount=backup_count,
			encoding='utf-8',
		)
		file_handler.setLevel(logging.DEBUG)
		file_handler.setFormatter(JSONFormatter())
		root_logger.addHandler(file_handler)


class EventType(Enum):
	API_CALL = 'api_call'
	RATE_COLLECTION = 'rate_collection'


@dataclass
class LogEvent:
	event_type: EventType
	level: int
	message: str
	timestamp: datetime
	duration_ms: float | None = None
	api_context: dict[str, Any] | None = None
	error_context: dict[str, Any] | None = None

	def to_dict(self) -> dict[str, Any]:
		data = asdict(self)
		data['timestamp'] = self.timestamp.isoformat()
		data['event_type'] = self.event_type.value
		data['level'] = logging.getLevelName(self.level)
		return data


class ApiCallLogger:
	def __init__(self, logger: logging.Logger | None = None):
		self.logger = logger or logging.getLogger(API_LOGGER_NAME)

	def log_event(self, event: LogEvent) -> None:
		self.logger.log(event.level, event.message, extra={'extra_data': event.to_dict()})

	def log_api_call(
		self,
		provider_name: str,
		endpoint: str,
		success: bool,
		response_time_ms: float,
		status_code: int | None = None,
		error_message: str | None = None,
		rate_data: dict[str, Any] | None = None,
	) -> None:
		event = LogEvent(
			event_type=EventType.API_CALL,
			level=logging.INFO if success else logging.ERROR,
			message=f"API call to {provider_name}{endpoint}: {'SUCCESS' if success else 'FAILED'}",
			timestamp=datetime.now(),
			duration_ms=response_time_ms,
			api_context={
				'provider': provider_name,
				'endpoint': endpoint,
				'success': success,
				'status_code': status_code,
				'response_time_ms': response_time_ms,
				'rate_data': rate_data,
			},
			error_context={'error_message': error_message} if error_message else None,
		)
		self.log_event(event)

	def log_rate_collection(
		self,
		pairs: list[str],
		success: bool,
		duration_ms: float,
		completed: int,
		error_message: str | None = None,
	) -> None:
		event = LogEvent(
			event_type=EventType.RATE_COLLECTION,
			level=logging.INFO if success else logging.ERROR,
			message=f"Rate collection {completed}/{len(pairs)} pairs: {'SUCCESS' if success else 'FAILED'}",
			timestamp=datetime.now(),
			duration_ms=duration_ms,
			api_context={'pairs': pairs, 'completed': completed},
			error_context={'error_message': error_message} if error_message else None,
		)
		self.log_event(event)
