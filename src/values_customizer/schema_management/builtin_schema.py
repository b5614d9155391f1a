"""Built-in Helm chart values schema used when no schema source is configured."""

from __future__ import annotations

from .schema_models import SchemaConfig

HELM_VALUES_SCHEMA_TEXT = """\
type: object
properties:
  replicaCount:
    description: Number of pod replicas.
    oneOf:
      - const: 1
      - const: 2
      - const: 3
      - const: 4
      - const: 5
      - const: 6
      - const: 7
      - const: 8
      - const: 9
      - const: 10
  image:
    type: object
    properties:
      repository:
        enum: [nginx, httpd, redis]
      tag:
        type: string
      pullPolicy:
        enum: [Always, IfNotPresent, Never]
  service:
    type: object
    properties:
      type:
        enum: [ClusterIP, NodePort, LoadBalancer]
      port:
        type: integer
        minimum: 1
        maximum: 65535
"""


def builtin_schema_config() -> SchemaConfig:
    """Return the schema settings for the built-in Helm values schema."""
    return SchemaConfig(text=HELM_VALUES_SCHEMA_TEXT, source_path=None)
