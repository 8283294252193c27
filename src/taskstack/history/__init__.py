"""
Undo history.

Components:
- action_models.py: reversible action records and undo results
- action_history.py: LIFO stack with undo dispatch
"""
