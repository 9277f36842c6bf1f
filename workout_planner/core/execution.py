from __future__ import annotations

from typing import Any, Callable, Dict, TypeVar

T = TypeVar("T")


class GraphExecutor:
    """Generic executor for compiled graphs"""

    @staticmethod
    def execute(
        graph: Any,
        init_state: Dict[str, Any],
        to_result: Callable[[Dict[str, Any]], T],
    ) -> T:
        """Invoke the graph and convert its final state into a result.

        Node exceptions are not caught here.
        """
        final_state = graph.invoke(init_state)
        return to_result(final_state)
