"""Business logic services.

Services contain all business logic and are called by routes.
Services accept their stores explicitly through their constructors.
"""
