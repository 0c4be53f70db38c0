"""Base class for graph algorithms."""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from time import time
from typing import Generator, Generic, Optional, TypeVar

from ..graph import Graph
from .models import PerformanceMetrics
from .utils import MemoryManager

logger = logging.getLogger(__name__)

# Type variable for algorithm results
T = TypeVar("T")


class GraphAlgorithm(ABC, Generic[T]):
    """
    Abstract base class for algorithms that read a graph.

    Algorithms borrow the graph read-only and allocate their own scratch
    state on every ``run``, so one instance may be run repeatedly.

    Attributes:
        graph (Graph): Graph the algorithm reads
        memory_manager (MemoryManager): Optional memory limit enforcement
        metrics (Optional[PerformanceMetrics]): Metrics of the last run
    """

    operation = "graph_algorithm"

    def __init__(self, graph: Graph, max_memory_mb: Optional[float] = None):
        """Initialize algorithm with graph and optional memory limit."""
        self.graph = graph
        self.memory_manager = MemoryManager(max_memory_mb)
        self.metrics: Optional[PerformanceMetrics] = None

    @contextmanager
    def _run_context(self) -> Generator[PerformanceMetrics, None, None]:
        """Context manager tracking metrics for one run."""
        metrics = PerformanceMetrics(operation=self.operation, start_time=time())
        self.metrics = metrics
        self.memory_manager.reset_peak_memory()
        try:
            yield metrics
        finally:
            metrics.end_time = time()
            metrics.max_memory_used = self.memory_manager.peak_memory
            logger.debug(
                "%s finished in %.2fms, %s nodes explored",
                self.operation,
                metrics.duration,
                metrics.nodes_explored,
            )

    def validate_source(self, source: int) -> None:
        """Validate that the source node exists in the graph."""
        self.graph.validate_node(source)

    @abstractmethod
    def run(self, *args, **kwargs) -> T:
        """Run the algorithm against the graph."""
