"""kprovision: one-shot creation of the apiserver workload in a Kubernetes cluster.

- `manifests`: typed descriptors for the four objects
- `plan`: ordered create steps
- `kube`: config resolution + dynamic client
- `apply`: runs the steps against an injected client
- `config`: environment defaults + flag overrides
- `errors`: failure classes and their exit codes
- `io_utils`: logging, YAML rendering, coloured console lines
"""
