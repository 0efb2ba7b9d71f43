"""Business modules; each one owns its domain, application, infrastructure and api layers."""
