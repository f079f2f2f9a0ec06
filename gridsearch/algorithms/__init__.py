"""Grid model, priority queue, heuristics and the algorithm plugin registry."""
