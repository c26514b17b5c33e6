"""GraphQL host layer: extension service, response formatting and schema wiring."""
