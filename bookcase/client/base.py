# bookcase/client/base.py
from typing import Any, Generic, List, Optional, Type, TypeVar, Union
from urllib.parse import quote
import logging

import requests
from pydantic import BaseModel

from bookcase.config import settings
from bookcase.exceptions import BadRequest, BookcaseError, InternalServerError, NotFound, NotUnique

logger = logging.getLogger(__name__)

ERRORS_BY_STATUS = {
    400: BadRequest,
    404: NotFound,
    409: NotUnique,
}

S = TypeVar("S", bound=BaseModel)


def error_for(response) -> BookcaseError:
    """Turn a non-2xx response back into the exception the server raised"""
    error_class = ERRORS_BY_STATUS.get(response.status_code, InternalServerError)
    return error_class(response.text or f"HTTP {response.status_code}")


class BookcaseClient:
    """Connection settings shared by the per-resource clients.

    Construct one and hand it to each resource client::

        client = BookcaseClient("http://localhost:8000")
        authors = AuthorClient(client)

    Args:
        base_url: Root URL of the API; settings.api_url if None
        session: Anything with the requests.Session call surface
                 (tests pass a FastAPI TestClient); a new Session if None
        timeout: Seconds to wait for each response
    """

    def __init__(self, base_url: Optional[str] = None, session: Any = None, timeout: float = 10):
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def url(self, *parts: Union[str, int]) -> str:
        return "/".join([self.base_url] + [quote(str(part), safe="") for part in parts])

    def request(self, method: str, *parts: Union[str, int], json: Optional[dict] = None):
        url = self.url(*parts)
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, json=json, timeout=self.timeout)
        except requests.RequestException as e:
            raise InternalServerError(f"{method} {url} failed: {e}") from e
        if response.status_code >= 400:
            raise error_for(response)
        return response

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class ResourceClient(Generic[S]):
    """find / find_all / insert / update / delete for one REST resource"""

    path: str
    schema: Type[S]

    def __init__(self, client: BookcaseClient):
        self.client = client

    def _one(self, response) -> S:
        return self.schema.model_validate(response.json())

    def _many(self, response) -> List[S]:
        return [self.schema.model_validate(item) for item in response.json()]

    def find(self, entity_id: int) -> S:
        return self._one(self.client.request("GET", self.path, entity_id))

    def find_all(self) -> List[S]:
        return self._many(self.client.request("GET", self.path))

    def insert(self, entity: BaseModel) -> S:
        return self._one(self.client.request("POST", self.path, json=entity.model_dump(mode="json")))

    def update(self, entity_id: int, entity: BaseModel) -> S:
        return self._one(
            self.client.request("PUT", self.path, entity_id, json=entity.model_dump(mode="json"))
        )

    def delete(self, entity_id: int) -> S:
        return self._one(self.client.request("DELETE", self.path, entity_id))
