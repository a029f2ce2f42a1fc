"""Application constants."""

CATEGORIES = ["daily", "weekly", "monthly"]

CATEGORY_LABELS = {
    "daily": "Daily",
    "weekly": "Weekly",
    "monthly": "Monthly",
}

DEFAULT_CATEGORY = "daily"

SCREENS = {"home", "login", "signup", "expense"}

DEFAULT_SCREEN = "home"

SEED_TRANSACTIONS = {
    "daily": [
        {"id": 1, "description": "Breakfast - Cafe Latte", "amount": -5, "date": "2024-12-11"},
        {"id": 2, "description": "Taxi to Work", "amount": -12, "date": "2024-12-11"},
        {"id": 3, "description": "Groceries", "amount": -25, "date": "2024-12-11"},
    ],
    "weekly": [
        {"id": 1, "description": "Freelance Income", "amount": 500, "date": "2024-12-08"},
        {"id": 2, "description": "Electricity Bill", "amount": -100, "date": "2024-12-09"},
        {"id": 3, "description": "Shopping - Clothes", "amount": -200, "date": "2024-12-09"},
    ],
    "monthly": [
        {"id": 1, "description": "Rent", "amount": -800, "date": "2024-12-01"},
        {"id": 2, "description": "Salary", "amount": 5000, "date": "2024-12-01"},
        {"id": 3, "description": "Internet Bill", "amount": -50, "date": "2024-12-02"},
    ],
}

CALENDAR_EVENTS_URL = "https://www.googleapis.com/calendar/v3/calendars/primary/events"
