"""Settings, logging, security helpers, outcomes and database access."""
