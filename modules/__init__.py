"""
Feature modules for the marketplace core.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- repository.py: Supabase table access and row mapping
- service.py: Business logic implementation
- exceptions.py: Module-specific exceptions

Modules communicate through interfaces, not concrete implementations.
Navigation has no backing table; it is a reducer plus the controller
screens drive.
"""
