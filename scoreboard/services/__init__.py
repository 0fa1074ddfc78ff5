"""Business logic services.

Services contain all business logic and are called by routes.
Services accept their store explicitly and never hold global state.
"""
