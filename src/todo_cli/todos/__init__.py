"""
Todo subsystem.

Components:
- todo_models.py: data structures (Todo, Priority, ListFilter)
- todo_store.py: in-memory store with add/complete/remove/filter
- todo_repo.py: JSON file persistence (load_store/save_store, JsonTodoRepo)
"""
