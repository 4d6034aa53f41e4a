"""linkhook - deployment-aware link destination resolution for rendered documents."""
