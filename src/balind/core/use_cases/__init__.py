from balind.core.use_cases.map_components import components_from_transaction, map_and_emit, map_components

__all__ = ["components_from_transaction", "map_and_emit", "map_components"]
