DEFAULTS = {
    # Edge attribute read by size(weighted=True) and written by add_weighted_edge
    "GRAPH_WEIGHT_KEY": "weight",
    # Weight assumed for edges that carry no weight attribute
    "GRAPH_DEFAULT_WEIGHT": 1,
    # Level applied by configure_logging()
    "LOG_LEVEL": "WARNING",
    # Record format applied by configure_logging()
    "LOG_FORMAT": "%(asctime)s %(levelname)s %(name)s %(message)s",
}
