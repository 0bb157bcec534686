from datetime import datetime, timezone

# instante fijo de los tests
NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
