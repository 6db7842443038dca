"""GraphQL documents sent by the client."""

ISSUE_FIELDS = """
fragment IssueFields on Issue {
  id
  title
  content
  status
  userId
  createdAt
}
"""

SIGNIN_MUTATION = """
mutation Signin($input: AuthInput!) {
  signin(input: $input) {
    id
    email
    createdAt
    token
  }
}
"""

SIGNUP_MUTATION = """
mutation Signup($input: AuthInput!) {
  createUser(input: $input) {
    id
    email
    createdAt
    token
  }
}
"""

USER_QUERY = """
query User {
  user {
    id
    email
    createdAt
  }
}
"""

ISSUES_QUERY = ISSUE_FIELDS + """
query Issues {
  issues {
    ...IssueFields
  }
}
"""

ISSUES_FOR_USER_QUERY = ISSUE_FIELDS + """
query IssuesForUser($email: String!) {
  issuesForUser(email: $email) {
    ...IssueFields
  }
}
"""

CREATE_ISSUE_MUTATION = ISSUE_FIELDS + """
mutation CreateIssue($input: CreateIssueInput!) {
  createIssue(input: $input) {
    ...IssueFields
  }
}
"""

UPDATE_ISSUE_STATUS_MUTATION = ISSUE_FIELDS + """
mutation UpdateIssueStatus($id: String!, $status: IssueStatus!) {
  updateIssueStatus(id: $id, status: $status) {
    ...IssueFields
  }
}
"""

DELETE_ISSUE_MUTATION = ISSUE_FIELDS + """
mutation DeleteIssue($id: ID!) {
  deleteIssue(id: $id) {
    ...IssueFields
  }
}
"""
