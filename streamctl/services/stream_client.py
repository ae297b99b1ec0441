# streamctl/services/stream_client.py

import logging
from typing import Any, Dict, Iterator, List, Optional, Union

import requests
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_fixed

from streamctl.errors import (
    ConflictError, NotFoundError, StreamApiError, TransportError, ValidationError, require_text
)
from streamctl.models import PageRequest, StreamDefinition, StreamPage

logger = logging.getLogger(__name__)


def parse_error_messages(response: requests.Response) -> List[str]:
    """Extract messages from a VndErrors body (list of logref/message objects)"""
    try:
        body = response.json()
    except ValueError:
        return [response.text] if response.text else []

    if isinstance(body, dict):
        body = body.get('errors', [body])
    return [entry['message'] for entry in body if isinstance(entry, dict) and entry.get('message')]


class StreamClient:
    """Client for the stream operations of an admin server"""

    DEFINITIONS_PATH = '/streams/definitions'
    DEPLOYMENTS_PATH = '/streams/deployments'

    DEFAULT_TIMEOUT = 30
    READ_RETRY_ATTEMPTS = 3
    READ_RETRY_DELAY = 2

    def __init__(self, base_url: str, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None,
                 read_retry_attempts: Optional[int] = None,
                 read_retry_delay: Optional[float] = None):
        self.base_url = require_text(base_url, "base_url must not be empty").rstrip('/')
        self.timeout = timeout if timeout is not None else self.DEFAULT_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers.setdefault('Accept', 'application/json')
        self.read_retry_attempts = (self.READ_RETRY_ATTEMPTS if read_retry_attempts is None
                                    else max(1, read_retry_attempts))
        self.read_retry_delay = self.READ_RETRY_DELAY if read_retry_delay is None else read_retry_delay

    @classmethod
    def from_config(cls, config, session: Optional[requests.Session] = None) -> 'StreamClient':
        """Create a client from a Config class or instance"""
        return cls(
            base_url=config.ADMIN_SERVER_URL,
            timeout=config.REQUEST_TIMEOUT,
            session=session,
            read_retry_attempts=config.READ_RETRY_ATTEMPTS,
            read_retry_delay=config.READ_RETRY_DELAY
        )

    def close(self):
        self.session.close()

    def __enter__(self) -> 'StreamClient':
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _make_request(self, method: str, path: str, **kwargs) -> requests.Response:
        """Issue a single HTTP request and map failures onto client errors"""
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            response = self.session.request(method=method, url=url, timeout=self.timeout, **kwargs)
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"{method} {url} failed: {str(e)}")
            raise TransportError(f"Unable to reach admin server at {self.base_url}: {str(e)}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {url} failed: {str(e)}")
            raise TransportError(f"Request to {url} failed: {str(e)}") from e

        if response.ok:
            return response

        messages = parse_error_messages(response)
        detail = '; '.join(messages) or response.reason or 'no details'
        message = f"{method} {url} returned {response.status_code}: {detail}"
        logger.error(message)

        if response.status_code == 409:
            raise ConflictError(message, response.status_code, messages)
        if response.status_code == 404:
            raise NotFoundError(message, response.status_code, messages)
        if response.status_code in (400, 422):
            raise ValidationError(message)
        if response.status_code >= 500:
            raise TransportError(message)
        raise StreamApiError(message, response.status_code, messages)

    @staticmethod
    def _resource_path(collection: str, name: str) -> str:
        """Path of a named resource; the name is a single escaped segment"""
        return f"{collection}/{requests.utils.quote(name, safe='')}"

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        """Decode a successful response body, mapping a non-JSON body to TransportError"""
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{response.url} returned {response.status_code} with a non-JSON body: {str(e)}")
            raise TransportError(
                f"Admin server returned {response.status_code} with an unreadable body"
            ) from e

    def _read(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """GET with retries on transport failures"""
        retrying = Retrying(
            stop=stop_after_attempt(self.read_retry_attempts),
            wait=wait_fixed(self.read_retry_delay),
            retry=retry_if_exception_type(TransportError),
            reraise=True
        )
        for attempt in retrying:
            with attempt:
                number = attempt.retry_state.attempt_number
                if number > 1:
                    logger.warning(f"Retrying GET {path} (attempt {number}/{self.read_retry_attempts})")
                response = self._make_request('GET', path, params=params)
        return self._decode(response)

    def create_stream(self, name: str, definition: str, deploy: bool = True) -> StreamDefinition:
        """
        Create a new stream, optionally deploying it.

        Args:
            name: Unique stream name
            definition: Stream definition text, e.g. "http | log"
            deploy: Deploy the stream right after creation

        Returns:
            The created stream as reported by the server

        Raises:
            ValidationError: If name or definition is blank
            ConflictError: If a stream with that name already exists
            TransportError: On network failure or service unavailability
        """
        require_text(name, "Stream name must not be empty")
        require_text(definition, "Stream definition must not be empty")

        logger.info(f"Creating stream '{name}' (deploy={deploy})")
        response = self._make_request(
            'POST',
            self.DEFINITIONS_PATH,
            data={'name': name, 'definition': definition, 'deploy': str(bool(deploy)).lower()}
        )
        stream = StreamDefinition.from_dict(self._decode(response))
        logger.debug(f"Created stream '{stream.name}' with status {stream.status}")
        return stream

    def list(self, page: Union[PageRequest, int, None] = None,
             size: Optional[int] = None) -> StreamPage:
        """List streams known to the system, one page at a time"""
        if isinstance(page, PageRequest):
            paging = page
        else:
            paging = PageRequest(page=page, size=size)

        data = self._read(self.DEFINITIONS_PATH, params=paging.to_params())
        return StreamPage.from_dict(data)

    def iter_streams(self, size: Optional[int] = None) -> Iterator[StreamDefinition]:
        """Iterate over every stream, following pages in order"""
        page_number = 0
        while True:
            page = self.list(PageRequest(page=page_number, size=size))
            yield from page
            if not page.items or not page.has_next:
                break
            page_number = page.number + 1

    def destroy(self, name: str) -> None:
        """Destroy an existing stream"""
        require_text(name, "Stream name must not be empty")
        logger.info(f"Destroying stream '{name}'")
        self._make_request('DELETE', self._resource_path(self.DEFINITIONS_PATH, name))

    def destroy_all(self) -> None:
        """Destroy all streams"""
        logger.info("Destroying all streams")
        self._make_request('DELETE', self.DEFINITIONS_PATH)

    def deploy(self, name: str, properties: Optional[Dict[str, str]] = None) -> None:
        """Deploy an existing stream with optional deployment properties"""
        require_text(name, "Stream name must not be empty")
        data = {}
        if properties:
            data['properties'] = ','.join(f"{key}={value}" for key, value in properties.items())
        logger.info(f"Deploying stream '{name}'")
        self._make_request('POST', self._resource_path(self.DEPLOYMENTS_PATH, name), data=data)

    def undeploy(self, name: str) -> None:
        """Undeploy a deployed stream"""
        require_text(name, "Stream name must not be empty")
        logger.info(f"Undeploying stream '{name}'")
        self._make_request('DELETE', self._resource_path(self.DEPLOYMENTS_PATH, name))
