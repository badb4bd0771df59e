"""
Service layer.

Each service wraps one collection of the ``MongoStore`` and performs a
single store call per operation, converting raw documents and driver
results into the schemas returned by the API.
"""
