# streamctl/models/stream_definition.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple
import logging

from streamctl.errors import ValidationError

logger = logging.getLogger(__name__)


class DeploymentStatus:
    """Deployment status values reported by the admin server"""
    DEPLOYED = "deployed"
    UNDEPLOYED = "undeployed"


def links_to_dict(links: Any) -> Dict[str, str]:
    """Normalize HAL links (list of rel/href objects or a rel->href mapping)"""
    if not links:
        return {}
    if isinstance(links, dict):
        return {
            rel: (value.get('href') if isinstance(value, dict) else value)
            for rel, value in links.items()
        }
    return {link['rel']: link['href'] for link in links if 'rel' in link and 'href' in link}


@dataclass(frozen=True)
class StreamDefinition:
    """A named stream definition as known to the admin server"""
    name: str
    definition: str
    deployed: bool = False
    status: Optional[str] = None
    links: Dict[str, str] = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StreamDefinition':
        """Create a StreamDefinition from the server's resource representation"""
        try:
            status = data.get('status')
            deployed = data.get('deployed')
            if deployed is None:
                deployed = status == DeploymentStatus.DEPLOYED
            return cls(
                name=data['name'],
                definition=data['definition'],
                deployed=bool(deployed),
                status=status,
                links=links_to_dict(data.get('links'))
            )
        except (KeyError, TypeError, AttributeError) as e:
            logger.error(f"Malformed stream resource: {data!r}")
            raise ValidationError(f"Invalid stream resource: {str(e)}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'definition': self.definition,
            'deployed': self.deployed,
            'status': self.status,
            'links': [{'rel': rel, 'href': href} for rel, href in self.links.items()]
        }


@dataclass(frozen=True)
class PageRequest:
    """
    Paging parameters for list operations.

    Unset fields are left to the server's defaults.
    """
    page: Optional[int] = None
    size: Optional[int] = None

    def __post_init__(self):
        if self.page is not None and self.page < 0:
            raise ValidationError(f"page must be zero or greater, got {self.page}")
        if self.size is not None and self.size < 1:
            raise ValidationError(f"size must be at least 1, got {self.size}")

    def to_params(self) -> Dict[str, int]:
        params = {}
        if self.page is not None:
            params['page'] = self.page
        if self.size is not None:
            params['size'] = self.size
        return params


@dataclass(frozen=True)
class StreamPage:
    """One page of stream definitions plus pagination metadata"""
    items: Tuple[StreamDefinition, ...] = ()
    size: int = 0
    number: int = 0
    total_elements: int = 0
    total_pages: int = 0
    next_link: Optional[str] = None

    @property
    def has_next(self) -> bool:
        return self.next_link is not None or self.number + 1 < self.total_pages

    def names(self) -> List[str]:
        return [item.name for item in self.items]

    def __iter__(self) -> Iterator[StreamDefinition]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StreamPage':
        """Create a StreamPage from a paged HAL collection"""
        try:
            content = data.get('content')
            if content is None:
                # Embedded form: {"_embedded": {"<rel>": [...]}}
                embedded = data.get('_embedded') or {}
                content = next(iter(embedded.values()), [])

            page_meta = data.get('page') or {}
            items = tuple(StreamDefinition.from_dict(item) for item in content)
            return cls(
                items=items,
                size=int(page_meta.get('size', len(items))),
                number=int(page_meta.get('number', 0)),
                total_elements=int(page_meta.get('totalElements', len(items))),
                total_pages=int(page_meta.get('totalPages', 1 if items else 0)),
                next_link=links_to_dict(data.get('links') or data.get('_links')).get('next')
            )
        except ValidationError:
            raise
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            logger.error(f"Malformed stream page: {data!r}")
            raise ValidationError(f"Invalid stream page: {str(e)}")
