"""Quiz-taking domain: models, session and rendering."""
