"""NiceGUI interface - the single-page assistant form.

Responsibilities:
    - Assistant selector with the selected assistant's description as heading
    - Input text area and file attach control
    - Process and Reset buttons bound to the workflow state
    - Result panel

Holds no business logic. Every operation delegates to a per-page Workflow.
"""
