"""Filter pipeline steps.

Each step is a pure function:
reduce_points → (FilterStateStore) → build_query → execute → adapt_result.
"""
