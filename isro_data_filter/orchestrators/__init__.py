"""Controller wiring the filter pipeline to UI collaborators.

- FilterController: Drawing lifecycle, query dispatch, stale-result discard
"""
