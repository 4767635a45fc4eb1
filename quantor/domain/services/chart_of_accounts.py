"""In-memory hierarchy for a chart of accounts.

The tree is built once from a flat list of account records and is read-only
afterwards: there is no incremental insert or removal, callers rebuild from a
fresh record list after any change in the persistence layer.

Hierarchy levels:

* level 1: category (e.g. Receitas, Despesas);
* level 2: subcategory (e.g. Receitas Operacionais);
* level 3: leaf account (e.g. Vendas de Produtos).
"""

from collections.abc import Iterable
import logging

from quantor.domain.constants import (
    ACCOUNT_LEVEL,
    CATEGORY_LEVEL,
    INDENT_PER_LEVEL,
    MAX_ACCOUNT_LEVEL,
    PATH_SEPARATOR,
    SUBCATEGORY_LEVEL,
)
from quantor.domain.errors import CyclicHierarchyError
from quantor.domain.models.accounts import AccountNode, AccountRecord
from quantor.domain.services.account_codes import (
    format_child_code,
    parse_code_segment,
)


class ChartOfAccountsTree:
    """Navigable hierarchy over a flat list of chart-of-accounts records.

    Nodes live in an id-keyed mapping owned by the instance. A record whose
    ``parent_id`` does not resolve, whose level is outside 1..3, or whose
    parent is a leaf account is kept in the mapping (see
    ``find_node_by_id``) but is not reachable from the roots.
    """

    def __init__(
        self,
        records: Iterable[AccountRecord],
        logger=None,
    ) -> None:
        """Build the tree.

        Args:
            records: Account records in any order.
            logger: Optional logger compatible with logging.Logger-like API,
                used for data-quality warnings.

        Raises:
            CyclicHierarchyError: If parent references form a cycle.
        """
        self._logger = logger or logging.getLogger(__name__)
        self._nodes: dict[int, AccountNode] = {}
        self._root_nodes: list[AccountNode] = []
        self._build_tree(records)

    def _build_tree(self, records: Iterable[AccountRecord]) -> None:
        for record in records:
            if record.id in self._nodes:
                self._logger.warning(
                    f"Duplicate account id {record.id}; "
                    f"keeping the last record ({record.code})"
                )
            self._nodes[record.id] = AccountNode.from_record(record)

        for node in self._nodes.values():
            if not CATEGORY_LEVEL <= node.level <= MAX_ACCOUNT_LEVEL:
                self._logger.warning(
                    f"Account {node.id} ({node.code}) has level {node.level} "
                    f"outside {CATEGORY_LEVEL}..{MAX_ACCOUNT_LEVEL}; "
                    "it is left out of the tree"
                )
                continue
            if node.parent_id is None:
                self._root_nodes.append(node)
                continue
            parent = self._nodes.get(node.parent_id)
            if parent is None:
                self._logger.warning(
                    f"Account {node.id} ({node.code}) references missing "
                    f"parent {node.parent_id}; it is left out of the tree"
                )
                continue
            if not self.can_have_children(parent):
                self._logger.warning(
                    f"Account {node.id} ({node.code}) is filed under leaf "
                    f"account {parent.id} ({parent.code}); "
                    "it is left out of the tree"
                )
                continue
            parent.children.append(node)

        self._check_for_cycles()
        self._sort_nodes(self._root_nodes)

    def _check_for_cycles(self) -> None:
        """Walk every parent chain once and fail on the first cycle."""
        resolved: set[int] = set()
        for start_id in self._nodes:
            trail: list[int] = []
            on_trail: set[int] = set()
            current_id: int | None = start_id
            while current_id in self._nodes and current_id not in resolved:
                if current_id in on_trail:
                    cycle_start = trail.index(current_id)
                    raise CyclicHierarchyError(
                        trail[cycle_start:] + [current_id]
                    )
                trail.append(current_id)
                on_trail.add(current_id)
                current_id = self._nodes[current_id].parent_id
            resolved.update(trail)

    def _sort_nodes(self, nodes: list[AccountNode]) -> None:
        # Plain string order on purpose: "10" sorts before "2".
        nodes.sort(key=lambda node: node.code)
        for node in nodes:
            self._sort_nodes(node.children)

    def get_root_nodes(self) -> list[AccountNode]:
        """Return the sorted root nodes.

        The internal list is returned as is; callers must not mutate it.
        """
        return self._root_nodes

    def get_flattened_nodes(self) -> list[AccountNode]:
        """Return every reachable node in depth-first pre-order."""
        flattened: list[AccountNode] = []

        def _add_node(node: AccountNode) -> None:
            flattened.append(node)
            for child in node.children:
                _add_node(child)

        for root in self._root_nodes:
            _add_node(root)
        return flattened

    def find_node_by_id(self, account_id: int) -> AccountNode | None:
        """Return the node for ``account_id``, orphans included."""
        return self._nodes.get(account_id)

    def get_node_path(self, account_id: int) -> str:
        """Return the breadcrumb from the root down to ``account_id``.

        Args:
            account_id: Id of the node to describe.

        Returns:
            str: Names joined by ``" > "``, e.g.
            ``"Receitas > Receitas Operacionais > Vendas de Produtos"``, or an
            empty string when the id is unknown. A broken parent chain ends
            the path at the last resolvable ancestor.
        """
        current = self.find_node_by_id(account_id)
        if current is None:
            return ""

        names: list[str] = []
        while current is not None:
            names.append(current.name)
            if current.parent_id is None:
                break
            current = self.find_node_by_id(current.parent_id)
        return PATH_SEPARATOR.join(reversed(names))

    def get_categories(self) -> list[AccountNode]:
        """Return root nodes at the category level."""
        return [
            node for node in self._root_nodes if node.level == CATEGORY_LEVEL
        ]

    def get_subcategories(self, category_id: int) -> list[AccountNode]:
        """Return the subcategories under ``category_id``."""
        return self._children_at_level(category_id, SUBCATEGORY_LEVEL)

    def get_accounts(self, subcategory_id: int) -> list[AccountNode]:
        """Return the leaf accounts under ``subcategory_id``."""
        return self._children_at_level(subcategory_id, ACCOUNT_LEVEL)

    def _children_at_level(
        self,
        account_id: int,
        level: int,
    ) -> list[AccountNode]:
        node = self.find_node_by_id(account_id)
        if node is None:
            return []
        return [child for child in node.children if child.level == level]

    @staticmethod
    def get_indentation_level(node: AccountNode) -> int:
        """Return the rendering indentation for ``node`` in pixels."""
        return (node.level - 1) * INDENT_PER_LEVEL

    @staticmethod
    def can_have_children(node: AccountNode) -> bool:
        """Return True when ``node`` is above the leaf level."""
        return node.level < MAX_ACCOUNT_LEVEL

    def generate_next_code(self, parent_id: int | None = None) -> str:
        """Return the next free code for a new account.

        The code is advisory only: nothing is reserved, and the caller
        inserts the account separately.

        Args:
            parent_id: Parent of the new account, or None for a new category.

        Returns:
            str: ``"N"`` for a category, ``"N.M"`` under a category,
            ``"N.M.PPP"`` under a subcategory. Falls back to ``"1"`` when the
            parent is unknown or cannot take children.
        """
        if parent_id is None:
            highest = self._highest_segment(self._root_nodes, 0)
            return str(highest + 1)

        parent = self.find_node_by_id(parent_id)
        if parent is None:
            return "1"

        if parent.level in (CATEGORY_LEVEL, SUBCATEGORY_LEVEL):
            highest = self._highest_segment(parent.children, parent.level)
            return format_child_code(parent.code, highest + 1, parent.level + 1)

        self._logger.warning(
            f"Account {parent.id} at level {parent.level} cannot have "
            f"children; falling back to code 1"
        )
        return "1"

    def _highest_segment(self, nodes: list[AccountNode], index: int) -> int:
        """Return the largest numeric segment at ``index``, or 0."""
        highest = 0
        for node in nodes:
            value = parse_code_segment(node.code, index)
            if value is None:
                self._logger.warning(
                    f"Ignoring non-numeric code {node.code!r} "
                    f"of account {node.id}"
                )
                continue
            highest = max(highest, value)
        return highest


def build_chart_of_accounts_tree(
    records: Iterable[AccountRecord],
    logger=None,
) -> ChartOfAccountsTree:
    """Build a ChartOfAccountsTree from ``records``."""
    return ChartOfAccountsTree(records, logger=logger)


__all__ = ["ChartOfAccountsTree", "build_chart_of_accounts_tree"]
