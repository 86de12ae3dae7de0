# Helpers for draft generation. They work on already-fetched events
# (newest first) and never touch the database.


def extract_recommended_sku(events):
    """Trimmed ``sku`` of the newest event carrying a non-empty one, else None"""
    for event in events:
        properties = event.properties
        if isinstance(properties, dict):
            sku = properties.get('sku')
            if isinstance(sku, str) and sku.strip():
                return sku.strip()
    return None


def extract_recent_event_type(events):
    for event in events:
        return event.type
    return None
