"""Important-cut enumeration entry points.

`enumerate_important_cuts` validates the problem eagerly and returns a lazy
iterator over important cuts. With ``SearchConfig.parallelism > 1`` the top of
the branching tree is expanded in-process and the remaining independent
subtrees are explored in a ``ProcessPoolExecutor``; the consuming process
deduplicates results, so no state is shared between workers.
"""

from __future__ import annotations

import os
import pickle
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import FrozenSet, Hashable, Iterable, Iterator, List, Optional, Set

import networkx as nx

from impcut.algorithms.bfs import reachable
from impcut.algorithms.important_cuts import (
    Candidate,
    SearchState,
    filter_candidates,
    iter_candidates,
    search_important_cuts,
    split_frontier,
)
from impcut.algorithms.types import Cut
from impcut.algorithms.validation import prepare_problem
from impcut.config import SEARCH_CONFIG, SearchConfig
from impcut.graph.indexed import IndexedGraph
from impcut.logging import get_logger

logger = get_logger(__name__)

# Per-process problem set by `_worker_init`
_worker_problem: Optional[tuple] = None


def _worker_init(problem_pickle: bytes) -> None:
    """Initialize a worker process with the shared problem.

    Called once per worker process lifetime via ProcessPoolExecutor's
    initializer so the graph is deserialized once rather than per task.
    """
    global _worker_problem
    _worker_problem = pickle.loads(problem_pickle)

    worker_logger = get_logger(f"{__name__}.worker")
    worker_logger.debug(f"Worker {os.getpid()} initialized with problem")


def _explore_subtree(state: SearchState) -> List[Candidate]:
    """Return the important candidates of one subtree (worker side)."""
    if _worker_problem is None:
        raise RuntimeError("Worker process was not initialized")
    graph, sources, sinks = _worker_problem
    return list(
        filter_candidates(graph, sources, sinks, iter_candidates(graph, sinks, state))
    )


def enumerate_important_cuts(
    graph: nx.Graph,
    sources: Iterable[Hashable],
    sinks: Iterable[Hashable],
    k: int,
    *,
    config: Optional[SearchConfig] = None,
) -> Iterator[Cut]:
    """Enumerate the important (sources, sinks)-cuts of size at most ``k``.

    Input is validated before this function returns, so invalid input raises
    immediately and nothing is yielded. Each call starts a fresh search.

    Args:
        graph: Undirected NetworkX graph; multigraphs are simplified and edge
            weights are ignored.
        sources: Source nodes ``S``.
        sinks: Sink nodes ``T``.
        k: Maximum cut size.
        config: Search configuration; defaults to ``SEARCH_CONFIG``.

    Returns:
        Iterator[Cut]: Lazy iterator over important cuts, without duplicates.
        An empty iterator means no cut of size at most ``k`` separates the
        sets.

    Raises:
        InvalidInputError: If ``S`` and ``T`` intersect, a node is unknown,
            ``k`` is negative, or the graph is directed.

    Examples:
        >>> g = nx.path_graph([1, 2, 3, 4, 5])
        >>> [cut.edges for cut in enumerate_important_cuts(g, {1}, {5}, 1)]
        [((4, 5),)]
    """
    indexed, src, dst = prepare_problem(graph, sources, sinks, k)
    cfg = config or SEARCH_CONFIG
    if cfg.parallelism > 1:
        return _run_parallel(indexed, src, dst, k, cfg)
    return _run_serial(indexed, src, dst, k)


def important_cuts(
    graph: nx.Graph,
    sources: Iterable[Hashable],
    sinks: Iterable[Hashable],
    k: int,
    *,
    config: Optional[SearchConfig] = None,
) -> List[Cut]:
    """Return all important cuts of size at most ``k``, sorted by size then edges."""
    return sorted(enumerate_important_cuts(graph, sources, sinks, k, config=config))


def _to_cut(
    graph: IndexedGraph, sources: FrozenSet[int], candidate: Candidate
) -> Cut:
    side = reachable(graph, sources, frozenset(candidate))
    return Cut.from_edge_ids(graph, candidate, side)


def _run_serial(
    graph: IndexedGraph, sources: FrozenSet[int], sinks: FrozenSet[int], k: int
) -> Iterator[Cut]:
    logger.debug(
        f"Enumerating important cuts (k={k}) on {graph!r} "
        f"with |S|={len(sources)}, |T|={len(sinks)}"
    )
    start_time = time.time()
    count = 0
    for candidate in search_important_cuts(graph, sources, sinks, k):
        count += 1
        yield _to_cut(graph, sources, candidate)

    elapsed_time = time.time() - start_time
    logger.info(f"Found {count} important cut(s) with k={k} in {elapsed_time:.3f}s")


def _run_parallel(
    graph: IndexedGraph,
    sources: FrozenSet[int],
    sinks: FrozenSet[int],
    k: int,
    config: SearchConfig,
) -> Iterator[Cut]:
    start_time = time.time()
    seen: Set[Candidate] = set()
    count = 0

    root = SearchState(sources, k)
    head, frontier = split_frontier(graph, sinks, root, config.frontier_width)
    for candidate in filter_candidates(graph, sources, sinks, head, seen=seen):
        count += 1
        yield _to_cut(graph, sources, candidate)

    if frontier:
        workers = config.workers_for(len(frontier))
        logger.info(
            f"Exploring {len(frontier)} subtrees with {workers} parallel workers"
        )
        problem_pickle = pickle.dumps((graph, sources, sinks))
        logger.debug(f"Serialized problem once: {len(problem_pickle)} bytes")

        executor = ProcessPoolExecutor(
            max_workers=workers,
            initializer=_worker_init,
            initargs=(problem_pickle,),
        )
        try:
            futures = [executor.submit(_explore_subtree, state) for state in frontier]
            for future in as_completed(futures):
                for candidate in future.result():
                    if candidate in seen:
                        continue
                    seen.add(candidate)
                    count += 1
                    yield _to_cut(graph, sources, candidate)
        finally:
            # Also runs when the consumer closes the generator early
            executor.shutdown(wait=True, cancel_futures=True)

    elapsed_time = time.time() - start_time
    logger.info(f"Found {count} important cut(s) with k={k} in {elapsed_time:.3f}s")
