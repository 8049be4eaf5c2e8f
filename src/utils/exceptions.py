class KoanError(Exception):
    """Base exception for the koan runner."""


class DuplicateOrdinalError(KoanError):
    def __init__(self, topic: str, ordinal: int, existing: str):
        self.topic = topic
        self.ordinal = ordinal
        self.existing = existing
        super().__init__(
            f"Duplicate ordinal {ordinal} in topic '{topic}' (already used by '{existing}')"
        )


class InvalidKoanError(KoanError):
    def __init__(self, topic: str, name: str, detail: str):
        self.topic = topic
        self.name = name
        super().__init__(f"Invalid koan '{name}' in topic '{topic}': {detail}")


class RegistryFrozenError(KoanError):
    def __init__(self, topic: str, name: str):
        self.topic = topic
        self.name = name
        super().__init__(f"Registry is frozen; cannot register '{topic}.{name}'")


class TopicNotFoundError(KoanError):
    def __init__(self, topic: str):
        self.topic = topic
        super().__init__(f"Topic not found: {topic}")


class KoanNotFoundError(KoanError):
    def __init__(self, topic: str, ordinal: int):
        self.topic = topic
        self.ordinal = ordinal
        super().__init__(f"Koan {ordinal} not found in topic '{topic}'")


class KoanLoadError(KoanError):
    def __init__(self, source: str, detail: str):
        self.source = source
        super().__init__(f"Failed to load koans from {source}: {detail}")
