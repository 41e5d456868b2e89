"""
Trip planner package for the West Airlines planning portal.

This package contains:
- shared/: Common infrastructure (LLM client, logging, contracts)
- intake/: Trip form validation, date defaulting and request storage
- gateway/: POST /api/trip-planner, the single-shot model proxy
- results/: Results workflow (load request, call gateway, normalize)
"""

from tripplanner.intake.form_state import TripFormState
from tripplanner.results.graph.build import create_results_graph, run_trip_results

__all__ = ["TripFormState", "create_results_graph", "run_trip_results"]
