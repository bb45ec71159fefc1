"""
COMMANDS - Write operations (CQRS)

Subfolders:
- work_orders/ → create_work_order, update_work_order, delete_work_order
"""
