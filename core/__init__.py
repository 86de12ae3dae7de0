"""Core project package: settings, URL routing and the GraphQL schema."""
