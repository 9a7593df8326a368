"""BaseService — shared foundation for esuctl services.

Every service receives a :class:`Workspace` at construction time and reads
graphs through it. Load failures and missing graph blocks are turned into
failed ServiceResults here so individual operations only handle their own
argument checks.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from esuctl.domain.errors import GraphError
from esuctl.services.result import LOAD_ERROR, NOT_FOUND, ServiceResult

if TYPE_CHECKING:
    from esuctl.infrastructure.loader import LoadedGraph
    from esuctl.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class SubgraphService(BaseService):
            def enumerate(self, k: int, *, index: int = 1) -> ServiceResult:
                loaded = self._load_block("enumerate", index)
                if isinstance(loaded, ServiceResult):
                    return loaded
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    def _load_block(self, op: str, index: int) -> LoadedGraph | ServiceResult:
        """Return graph block *index*, or a failed result explaining why not."""
        try:
            return self._workspace.block(index)
        except (OSError, GraphError) as exc:
            logger.debug("Loading %s failed", self._workspace.source, exc_info=True)
            return ServiceResult.failure(
                op, LOAD_ERROR, str(exc), source=str(self._workspace.source)
            )
        except IndexError as exc:
            return ServiceResult.failure(op, NOT_FOUND, str(exc), graph=index)
