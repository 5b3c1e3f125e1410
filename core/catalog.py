from typing import Dict, Iterable, Iterator, List, Optional, Union
from schemas.records import SyncMethod
from exceptions.custom_errors import NotFoundError, ValidationError
from utils.loader import load_predefined_protocols, parse_records
from utils.validate import validate_protocol
from utils.logger import get_logger

logger = get_logger(__name__)


class ProtocolCatalog:
    """
    Read-only registry of protocol templates, predefined and user-defined.

    Protocols are kept in registration order: predefined ones first (from
    config/protocols.json), then the custom ones passed in.
    """

    def __init__(
        self,
        protocols: Optional[Iterable[Union[SyncMethod, dict]]] = None,
        include_predefined: bool = True,
    ):
        self._protocols: Dict[str, SyncMethod] = {}
        if include_predefined:
            for p in load_predefined_protocols():
                self._register(p)
        for p in parse_records(SyncMethod, protocols):
            self._register(p)
        logger.info(f"📚 Protocol catalog loaded with {len(self._protocols)} protocols.")

    def _register(self, protocol: SyncMethod) -> None:
        if protocol.id in self._protocols:
            raise ValidationError(f"Duplicate protocol id: {protocol.id}")
        self._protocols[protocol.id] = protocol

    def get(self, protocol_id: str) -> SyncMethod:
        try:
            return self._protocols[protocol_id]
        except KeyError:
            raise NotFoundError(f"Protocol '{protocol_id}' not found.") from None

    @staticmethod
    def validate(protocol: SyncMethod) -> None:
        """Raise ValidationError when the protocol is structurally invalid."""
        validate_protocol(protocol)

    def all(self) -> List[SyncMethod]:
        return list(self._protocols.values())

    def predefined(self) -> List[SyncMethod]:
        return [p for p in self._protocols.values() if not p.isCustom]

    def custom(self) -> List[SyncMethod]:
        return [p for p in self._protocols.values() if p.isCustom]

    def __contains__(self, protocol_id: str) -> bool:
        return protocol_id in self._protocols

    def __len__(self) -> int:
        return len(self._protocols)

    def __iter__(self) -> Iterator[SyncMethod]:
        return iter(self._protocols.values())
