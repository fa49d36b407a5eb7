"""Infrastructure layer - settings, logging, mail transport and errors."""
