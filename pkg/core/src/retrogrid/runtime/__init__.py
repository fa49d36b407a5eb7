"""Runtime wiring - program creation and creation notifications."""
