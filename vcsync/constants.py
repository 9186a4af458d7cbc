"""Keys and values shared between the syncer and the reconciler."""

from __future__ import annotations

# Keys under this prefix are owned by the syncer. Tenants may not set them.
RESERVED_KEY_PREFIX = "tenancy.x-k8s.io"

# LABEL_CLUSTER records which cluster this resource belongs to.
LABEL_CLUSTER = "tenancy.x-k8s.io/cluster"
# LABEL_UID is the uid in the tenant namespace.
LABEL_UID = "tenancy.x-k8s.io/uid"
# LABEL_NAMESPACE records which cluster namespace this resource belongs to.
LABEL_NAMESPACE = "tenancy.x-k8s.io/namespace"

# Token secrets are filled in by the token controller, not by tenants.
SECRET_TYPE_SERVICE_ACCOUNT_TOKEN = "kubernetes.io/service-account-token"
