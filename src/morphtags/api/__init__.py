"""HTTP API for morphology tooltips."""
