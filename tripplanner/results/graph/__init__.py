"""Graph construction for the results workflow."""

from tripplanner.results.graph.build import create_results_graph, run_trip_results, TripResults

__all__ = ["create_results_graph", "run_trip_results", "TripResults"]
