"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Transcript display for user, assistant and error entries
    - Generated SQL, charts and result tables per answer
    - CSV export of query results
    - Example questions, loading placeholder and error banner

Contains minimal business logic. Delegates state to the transcript
controller and rendering decisions to the visualization helpers.
"""
