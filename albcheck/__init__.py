"""Resolve ALB target-group health checks from ingress annotations."""
