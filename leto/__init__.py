"""Calendar decomposition engine for the ancient Bulgarian and Gregorian calendars."""
