"""Core blog components: catalog, rendering pipeline, routing and views."""
