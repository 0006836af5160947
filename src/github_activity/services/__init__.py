"""Services for fetching and assembling GitHub activity.

Modules:
    queries: GraphQL documents and the Connection enum
    github_graphql_client: httpx transport for the GraphQL API
    paginator: drains one paginated connection
    aggregator: builds an ActivityReport
    report_filter: repository/organization filtering
"""
