"""PeopleHub — employee records API and customizable dashboard client."""

__version__ = "1.0.0"
