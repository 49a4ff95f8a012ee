"""
Node Subpackage

Provides all graph node implementations.

Note: This package does not perform top-level imports to avoid circular import issues.
Node classes are discovered by walking this package in Workflow.node_registry.
"""
