"""
Boundary layer for external system integrations.

Handles persistence for the local knowledge store. The remote model
endpoint is reached through knowledge_assistant.core.rag_query.gateway.
"""
