from __future__ import annotations

import logging
from collections.abc import Hashable
from types import MappingProxyType
from typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
)

from graphkit.config.loader import get_config
from graphkit.config.settings import GraphConfig
from graphkit.exceptions import InvalidArgumentError, NotFoundError
from graphkit.graph.adjacency import (
    DirectedAdjacency,
    MultiEdges,
    SimpleEdges,
    UndirectedAdjacency,
)
from graphkit.graph.attributes import Attributes
from graphkit.utils.validation import as_collection, as_edge_tuples, as_node_ids


class Graph:
    """
    In-memory graph with attribute payloads on the graph, its nodes and its edges.

    One class serves all four variants. Two capability flags pick the
    strategies it is composed of:
    - directed:   UndirectedAdjacency or DirectedAdjacency
    - multigraph: SimpleEdges or MultiEdges

    Algorithms only rely on the public query/mutation surface below,
    never on the concrete strategies.

    Edge payloads are shared between access paths: for undirected graphs
    adj[u][v] is adj[v][u], for directed graphs adj[u][v] is pred[v][u].
    Writing through one path is visible through the other.
    """

    def __init__(
        self,
        *,
        directed: bool = False,
        multigraph: bool = False,
        config: Optional[GraphConfig] = None,
        **attrs: Any,
    ) -> None:
        self.config = config if config is not None else get_config().graph
        self.graph: Attributes = dict(attrs)
        self._nodes: Dict[Hashable, Attributes] = {}
        self._adjacency = DirectedAdjacency() if directed else UndirectedAdjacency()
        self._edges = MultiEdges() if multigraph else SimpleEdges()

    # ------------------------------------------------------------------
    # Variant
    # ------------------------------------------------------------------

    def is_directed(self) -> bool:
        return self._adjacency.directed

    def is_multigraph(self) -> bool:
        return self._edges.multigraph

    @property
    def variant(self) -> str:
        kind = "multi" if self.is_multigraph() else "simple"
        direction = "directed" if self.is_directed() else "undirected"
        return f"{direction}-{kind}"

    def fresh_copy(self, *, directed: Optional[bool] = None) -> "Graph":
        """
        Empty graph with this configuration and graph attributes.

        Keeps the variant unless `directed` overrides the direction.
        """
        g = Graph(
            directed=self.is_directed() if directed is None else directed,
            multigraph=self.is_multigraph(),
            config=self.config,
        )
        g.graph.update(self.graph)
        return g

    # ------------------------------------------------------------------
    # Raw state (read-only by convention)
    # ------------------------------------------------------------------

    @property
    def nodes(self) -> Dict[Hashable, Attributes]:
        return self._nodes

    @property
    def adj(self) -> Dict[Hashable, Dict[Hashable, Any]]:
        return self._adjacency.succ

    @property
    def pred(self) -> Dict[Hashable, Dict[Hashable, Any]]:
        self._require_directed("pred")
        return self._adjacency.pred

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._nodes)

    def __contains__(self, node: object) -> bool:
        try:
            return node in self._nodes
        except TypeError:
            return False

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def add_node(self, node: Hashable, **attrs: Any) -> None:
        """
        Add a node, or merge attributes into an existing one.
        """
        self.add_node_with(node, attrs)

    def add_node_with(self, node: Hashable, attrs: Mapping[Hashable, Any]) -> None:
        """
        Same as add_node, for attribute stores whose keys are not strings.
        """
        self._ensure_node(node)
        self._nodes[node].update(attrs)

    def add_nodes(self, nodes: Iterable[Any]) -> None:
        """
        Add many nodes. Items are node ids or (node, attrs) pairs.

        The batch is validated before any node is added.
        """
        batch = []
        for item in as_collection(nodes, what="node ids"):
            if (
                isinstance(item, (tuple, list))
                and len(item) == 2
                and isinstance(item[1], Mapping)
            ):
                node, attrs = item
            else:
                node, attrs = item, {}
            if not isinstance(node, Hashable):
                raise InvalidArgumentError(f"Node id {node!r} is not hashable")
            batch.append((node, attrs))

        for node, attrs in batch:
            self.add_node_with(node, attrs)

    def add_nodes_from(self, nodes: Iterable[Hashable]) -> None:
        """
        Add every item of any iterable as a node (a string adds its characters).
        """
        if nodes is None or not isinstance(nodes, Iterable):
            raise InvalidArgumentError(f"Expected an iterable of node ids, got {nodes!r}")
        self.add_nodes(list(nodes))

    def remove_node(self, node: Hashable) -> None:
        """
        Remove a node and every edge incident to it.
        """
        if node not in self:
            raise NotFoundError(f"No such node exists! ({node!r})")
        self._adjacency.remove_node(node)
        del self._nodes[node]

    def remove_nodes(self, nodes: Iterable[Hashable]) -> None:
        batch = as_node_ids(nodes)
        for node in batch:
            if node not in self._nodes:
                raise NotFoundError(f"No such node exists! ({node!r})")

        for node in dict.fromkeys(batch):
            self.remove_node(node)

    def has_node(self, node: Hashable) -> bool:
        return node in self

    def get_node_data(self, node: Hashable) -> Attributes:
        if node not in self:
            raise NotFoundError(f"No such node exists! ({node!r})")
        return self._nodes[node]

    def each_node(self, data: bool = False) -> Iterator[Any]:
        if data:
            yield from self._nodes.items()
        else:
            yield from self._nodes

    def number_of_nodes(self) -> int:
        return len(self._nodes)

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(
        self,
        u: Hashable,
        v: Hashable,
        key: Any = None,
        **attrs: Any,
    ) -> Any:
        """
        Add an edge, creating missing endpoints.

        Simple graphs merge attributes into an existing (u, v) edge.
        Multigraphs add a parallel edge under `key` (next free integer
        when omitted) and return the key used.

        `key` is reserved for the edge key and is rejected on simple
        graphs; use add_edge_with to set an attribute named "key".
        """
        return self.add_edge_with(u, v, attrs, key=key)

    def add_edge_with(
        self,
        u: Hashable,
        v: Hashable,
        attrs: Mapping[Hashable, Any],
        *,
        key: Any = None,
    ) -> Any:
        """
        Same as add_edge, for attribute stores whose keys are not strings.
        """
        if key is not None and not self.is_multigraph():
            raise InvalidArgumentError("Edge keys are only supported on multigraphs")
        self._ensure_node(u)
        self._ensure_node(v)
        return self._edges.add(self._adjacency, u, v, key, attrs)

    def add_edges(self, edges: Iterable[Sequence[Any]]) -> None:
        """
        Add many edges given as (u, v) or (u, v, attrs).

        Multigraphs also accept (u, v, key) and (u, v, key, attrs).
        The batch is validated before any edge is added.
        """
        batch = as_edge_tuples(edges, allow_key=self.is_multigraph())
        for u, v, key, attrs in batch:
            self.add_edge_with(u, v, attrs, key=key)
        logging.getLogger("graphkit.graph").debug(
            "added %s edges to %s graph", len(batch), self.variant
        )

    def add_edges_from(self, edges: Iterable[Sequence[Any]]) -> None:
        self.add_edges(edges)

    def add_weighted_edge(self, u: Hashable, v: Hashable, weight: Any) -> Any:
        return self.add_edge_with(u, v, {self.config.weight_key: weight})

    def add_weighted_edges(
        self,
        edges: Iterable[Sequence[Any]],
        weights: Iterable[Any],
    ) -> None:
        batch = as_edge_tuples(edges, allow_attrs=False)
        weight_list = as_collection(weights, what="weights")
        if len(batch) != len(weight_list):
            raise InvalidArgumentError(
                f"Got {len(batch)} edges but {len(weight_list)} weights"
            )
        for (u, v, _, _), weight in zip(batch, weight_list):
            self.add_weighted_edge(u, v, weight)

    def add_weighted_edges_from(self, edges: Iterable[Sequence[Any]]) -> None:
        """
        Add edges given as (u, v, weight) triples.
        """
        triples = as_collection(edges, what="weighted edges")
        for item in triples:
            if (
                isinstance(item, (str, bytes))
                or not isinstance(item, Sequence)
                or len(item) != 3
            ):
                raise InvalidArgumentError(f"Malformed weighted edge {item!r}")
        self.add_weighted_edges(
            [(u, v) for u, v, _ in triples],
            [w for _, _, w in triples],
        )

    def add_path(self, nodes: Iterable[Hashable], **attrs: Any) -> None:
        path = as_node_ids(nodes)
        if len(path) == 1:
            self._ensure_node(path[0])
        for u, v in zip(path, path[1:]):
            self.add_edge_with(u, v, attrs)

    def remove_edge(self, u: Hashable, v: Hashable, key: Any = None) -> None:
        """
        Remove an edge. On multigraphs an omitted key removes the
        most recently added parallel edge between u and v.
        """
        self._edges.remove(self._adjacency, u, v, key)

    def remove_edges(self, edges: Iterable[Sequence[Any]]) -> None:
        """
        Remove many edges given as (u, v), or (u, v, key) on multigraphs.

        Nothing is removed unless every listed edge can be.
        """
        batch = as_edge_tuples(
            edges,
            allow_key=self.is_multigraph(),
            allow_attrs=False,
        )

        per_pair: Dict[Any, List[Any]] = {}
        for u, v, key, _ in batch:
            if not self.has_edge(u, v, key):
                raise NotFoundError(f"No such edge exists! ({u!r}, {v!r})")
            pair = (u, v) if self.is_directed() else frozenset((u, v))
            per_pair.setdefault(pair, [u, v, []])[2].append(key)

        for u, v, keys in per_pair.values():
            explicit = [k for k in keys if k is not None]
            if len(keys) > self.number_of_edges(u, v) or len(set(explicit)) < len(explicit):
                raise NotFoundError(f"No such edge exists! ({u!r}, {v!r})")

        # Explicit keys first so that keyless removals cannot take them.
        for u, v, key, _ in sorted(batch, key=lambda e: e[2] is None):
            self.remove_edge(u, v, key)

    def has_edge(self, u: Hashable, v: Hashable, key: Any = None) -> bool:
        try:
            return self._edges.has(self._adjacency, u, v, key)
        except TypeError:
            return False

    def get_edge_data(self, u: Hashable, v: Hashable, key: Any = None) -> Any:
        """
        Live attribute store of an edge.

        On a multigraph without `key`, the key -> attributes mapping
        of every parallel edge between u and v.
        """
        return self._edges.get(self._adjacency, u, v, key)

    def each_edge(self, data: bool = False, keys: bool = False) -> Iterator[Tuple[Any, ...]]:
        """
        Yield every edge once: (u, v[, key][, attrs]).

        Undirected edges are reported from the endpoint seen first.
        Keys are only reported for multigraphs.
        """
        with_keys = keys and self.is_multigraph()
        for u, v, key, attrs in self._unique_edges():
            edge: Tuple[Any, ...] = (u, v)
            if with_keys:
                edge += (key,)
            if data:
                edge += (attrs,)
            yield edge

    def edges(self, data: bool = False, keys: bool = False) -> List[Tuple[Any, ...]]:
        return list(self.each_edge(data=data, keys=keys))

    def number_of_edges(self, u: Hashable = None, v: Hashable = None) -> int:
        """
        Count all edges, or the (parallel) edges between u and v.
        """
        if u is None:
            return sum(1 for _ in self._unique_edges())
        if not self.has_edge(u, v):
            return 0
        return self._edges.count(self._adjacency.succ[u][v])

    def size(self, weighted: bool = False) -> float:
        if not weighted:
            return self.number_of_edges()
        weight_key = self.config.weight_key
        default = self.config.default_weight
        return sum(
            attrs.get(weight_key, default)
            for _, _, _, attrs in self._unique_edges()
        )

    # ------------------------------------------------------------------
    # Neighbourhoods and degrees
    # ------------------------------------------------------------------

    def neighbours(self, node: Hashable) -> Mapping[Hashable, Any]:
        """
        Read-only view of adj[node] (successors for directed graphs).
        """
        if node not in self:
            raise NotFoundError(f"No such node exists! ({node!r})")
        return MappingProxyType(self._adjacency.succ[node])

    def successors(self, node: Hashable) -> Mapping[Hashable, Any]:
        return self.neighbours(node)

    def predecessors(self, node: Hashable) -> Mapping[Hashable, Any]:
        if node not in self:
            raise NotFoundError(f"No such node exists! ({node!r})")
        return MappingProxyType(self._adjacency.pred[node])

    def degree(self, nodes: Optional[Iterable[Hashable]] = None) -> Dict[Hashable, int]:
        """
        Degree per node: parallel edges each count, self-loops count twice.

        Directed graphs report in-degree plus out-degree.
        """
        selected = self._select(nodes)
        if self.is_directed():
            out_deg = self._count_slots(self._adjacency.succ, selected)
            in_deg = self._count_slots(self._adjacency.pred, selected)
            return {n: out_deg[n] + in_deg[n] for n in selected}

        degrees = self._count_slots(self._adjacency.succ, selected)
        for n in selected:
            nbrs = self._adjacency.succ[n]
            if n in nbrs:
                degrees[n] += self._edges.count(nbrs[n])
        return degrees

    def in_degree(self, nodes: Optional[Iterable[Hashable]] = None) -> Dict[Hashable, int]:
        self._require_directed("in_degree")
        return self._count_slots(self._adjacency.pred, self._select(nodes))

    def out_degree(self, nodes: Optional[Iterable[Hashable]] = None) -> Dict[Hashable, int]:
        self._require_directed("out_degree")
        return self._count_slots(self._adjacency.succ, self._select(nodes))

    # ------------------------------------------------------------------
    # Derived graphs
    # ------------------------------------------------------------------

    def copy(self) -> "Graph":
        g = self.fresh_copy()
        g._copy_nodes_from(self, self._nodes)
        g._copy_edges_from(self._unique_edges())
        return g

    def subgraph(self, nodes: Iterable[Hashable]) -> "Graph":
        """
        Induced subgraph on `nodes`, in this graph's node order.
        """
        wanted = set(as_node_ids(nodes))
        for node in wanted:
            if node not in self._nodes:
                raise InvalidArgumentError(f"Node {node!r} is not in the graph")

        g = self.fresh_copy()
        g._copy_nodes_from(self, (n for n in self._nodes if n in wanted))
        g._copy_edges_from(
            e for e in self._unique_edges()
            if e[0] in wanted and e[1] in wanted
        )
        return g

    def edge_subgraph(self, edges: Iterable[Sequence[Any]]) -> "Graph":
        """
        Graph made of the listed edges and the endpoints they mention.

        Edges are (u, v), or (u, v, key) on multigraphs; an omitted key
        on a multigraph selects every parallel edge between u and v.
        """
        batch = as_edge_tuples(
            edges,
            allow_key=self.is_multigraph(),
            allow_attrs=False,
        )
        for u, v, key, _ in batch:
            if not self.has_edge(u, v, key):
                raise NotFoundError(f"No such edge exists! ({u!r}, {v!r})")

        g = self.fresh_copy()
        for u, v, key, _ in batch:
            g._copy_nodes_from(self, (u, v))
            slot = self._adjacency.succ[u][v]
            for k, attrs in self._edges.items(slot):
                if key is None or k == key:
                    g.add_edge_with(u, v, attrs, key=k)
        return g

    def reverse(self) -> "Graph":
        self._require_directed("reverse")
        g = self.fresh_copy()
        g._copy_nodes_from(self, self._nodes)
        g._copy_edges_from(
            (v, u, key, attrs)
            for u, v, key, attrs in self._unique_edges()
        )
        return g

    def to_directed(self) -> "Graph":
        """
        Directed copy; each undirected edge becomes two directed edges
        with independent attribute copies.
        """
        g = self.fresh_copy(directed=True)
        g._copy_nodes_from(self, self._nodes)
        g._copy_edges_from(self._slot_edges())
        return g

    def to_undirected(self) -> "Graph":
        """
        Undirected copy; (u, v) and (v, u) collapse into one edge.

        Conflicting attributes resolve last-write-wins in adjacency
        iteration order.
        """
        g = self.fresh_copy(directed=False)
        g._copy_nodes_from(self, self._nodes)
        g._copy_edges_from(self._slot_edges())
        return g

    def clear(self) -> None:
        self.graph.clear()
        self._nodes.clear()
        self._adjacency.clear()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _ensure_node(self, node: Hashable) -> None:
        if not isinstance(node, Hashable):
            raise InvalidArgumentError(f"Node id {node!r} is not hashable")
        if node not in self._nodes:
            self._nodes[node] = {}
            self._adjacency.add_node(node)

    def _copy_nodes_from(self, other: "Graph", nodes: Iterable[Hashable]) -> None:
        for node in nodes:
            if node not in self._nodes:
                self.add_node_with(node, other._nodes[node])

    def _copy_edges_from(self, edges: Iterable[Tuple[Any, Any, Any, Attributes]]) -> None:
        """
        Add (u, v, key, attrs) edges; keys are kept when this graph is a multigraph.
        """
        keep_keys = self.is_multigraph()
        for u, v, key, attrs in edges:
            self.add_edge_with(u, v, attrs, key=key if keep_keys else None)

    def _slot_edges(self) -> Iterator[Tuple[Any, Any, Any, Attributes]]:
        """
        Every adjacency slot as (u, v, key, attrs); undirected edges appear
        once per orientation.
        """
        for u, nbrs in self._adjacency.succ.items():
            for v, slot in nbrs.items():
                for key, attrs in self._edges.items(slot):
                    yield u, v, key, attrs

    def _unique_edges(self) -> Iterator[Tuple[Any, Any, Any, Attributes]]:
        seen = set()
        for u, nbrs in self._adjacency.succ.items():
            for v, slot in nbrs.items():
                if v in seen:
                    continue
                for key, attrs in self._edges.items(slot):
                    yield u, v, key, attrs
            if not self.is_directed():
                seen.add(u)

    def _select(self, nodes: Optional[Iterable[Hashable]]) -> List[Hashable]:
        if nodes is None:
            return list(self._nodes)
        selected = as_node_ids(nodes)
        for node in selected:
            if node not in self._nodes:
                raise NotFoundError(f"No such node exists! ({node!r})")
        return selected

    def _count_slots(
        self,
        adjacency: Mapping[Hashable, Mapping[Hashable, Any]],
        nodes: Iterable[Hashable],
    ) -> Dict[Hashable, int]:
        return {
            n: sum(self._edges.count(slot) for slot in adjacency[n].values())
            for n in nodes
        }

    def _require_directed(self, operation: str) -> None:
        if not self.is_directed():
            raise InvalidArgumentError(f"{operation} is only defined on directed graphs")
