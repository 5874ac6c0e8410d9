from .checklist_store import ChecklistStore

__all__ = ['ChecklistStore']
