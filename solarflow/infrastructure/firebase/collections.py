"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when you first write a document. Use these constants so collection names
stay consistent with the admin portal that writes the same documents.
"""

# Global workflow configuration
COLLECTION_STAGES = "stages"
COLLECTION_SECTIONS = "sections"
COLLECTION_QUESTIONS = "questions"

# Project data
COLLECTION_PROJECTS = "projects"
COLLECTION_CUSTOMERS = "customers"
COLLECTION_CREDIT_APPROVALS = "credit_approvals"
# Document id is "<project_id>__<question_id>" (one submission per pair).
COLLECTION_SUBMISSIONS = "submissions"
