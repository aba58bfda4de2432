"""Shared fixtures for graphql-openapi tests."""

import pytest

from graphql_openapi import GraphQLToOpenAPIConverter

STAR_WARS_SDL = '''
"""Anything that appears in the films"""
interface Character {
  id: ID!
  name: String
}

type Human implements Character {
  id: ID!
  name: String
  homePlanet: String
  height(unit: Unit = METER): Float
}

type Droid implements Character {
  id: ID!
  name: String
  primaryFunction: String
}

union SearchResult = Human | Droid

enum Episode {
  NEWHOPE
  EMPIRE
  JEDI
}

enum Unit {
  METER
  FOOT
}

scalar DateTime

input DateFilter {
  after: String
  before: String
}

input ReviewFilter {
  episode: Episode!
  stars: Int
  tags: [String!]
  "Only reviews in this window"
  since: DateFilter
}

type Review {
  stars: Int!
  commentary: String
  createdAt: DateTime
}

type Query {
  hero(episode: Episode): Human
  "The hero's name"
  heroName: String
  humans: [Human!]!
  maybeHumans: [Human]
  search(text: String!): [SearchResult]
  firstResult: SearchResult
  character(id: ID!): Character
  reviews(filter: ReviewFilter): [Review!]!
  ids: [ID!]
  tags: [String]
  favoriteEpisode: Episode!
  count: Int!
  matrix: [[Int!]]
}
'''


@pytest.fixture
def sdl() -> str:
    return STAR_WARS_SDL


@pytest.fixture
def converter() -> GraphQLToOpenAPIConverter:
    return GraphQLToOpenAPIConverter(schema=STAR_WARS_SDL)


def response_of(document: dict, operation_name: str) -> dict:
    """The 200 JSON response schema of GET /<operation_name>."""
    get = document["paths"]["/" + operation_name]["get"]
    return get["responses"]["200"]["content"]["application/json"]["schema"]


def parameters_of(document: dict, operation_name: str) -> list[dict]:
    return document["paths"]["/" + operation_name]["get"]["parameters"]
