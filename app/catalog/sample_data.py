"""
==============================================================================
Sample Catalog Data
==============================================================================

The default shop inventory: six books about REST.

Each record is a ``(title, description, retail_price_in_cents)`` tuple.
Identifiers are assigned when the catalog is built.

==============================================================================
"""

from typing import Tuple


ProductRecord = Tuple[str, str, int]


SAMPLE_PRODUCTS: Tuple[ProductRecord, ...] = (
    (
        "REST in Practice: Hypermedia and Systems Architecture",
        "Why don't typical enterprise projects go as smoothly as projects you "
        "develop for the Web? Does the REST architectural style really present "
        "a viable alternative for building distributed systems and "
        "enterprise-class applications?\n"
        "\n"
        "In this insightful book, three SOA experts provide a down-to-earth "
        "explanation of REST and demonstrate how you can develop simple and "
        "elegant distributed hypermedia systems by applying the Web's guiding "
        "principles to common enterprise computing problems.",
        2795,
    ),
    (
        "RESTful Web APIs",
        "The popularity of REST in recent years has led to tremendous growth in "
        "almost-RESTful APIs that don’t include many of the architecture’s "
        "benefits. With this practical guide, you’ll learn what it takes to "
        "design usable REST APIs that evolve over time. By focusing on "
        "solutions that cross a variety of domains, this book shows you how to "
        "create powerful and secure applications, using the tools designed for "
        "the world’s most successful distributed computing system: the World "
        "Wide Web.",
        2995,
    ),
    (
        "Spring REST",
        "Spring REST is a practical guide for designing and developing RESTful "
        "APIs using the Spring Framework. This book walks you through the "
        "process of designing and building a REST application while taking a "
        "deep dive into design principles and best practices for versioning, "
        "security, documentation, error handling, paging, and sorting.",
        2651,
    ),
    (
        "RESTful Web API Design with Node.js",
        "Create a fully featured RESTful API solution from scratch.\n"
        "Learn how to leverage Node.JS, Express, MongoDB and NoSQL datastores "
        "to give an extra edge to your REST API design.\n"
        "Use this practical guide to integrate MongoDB in your Node.js "
        "application.",
        2887,
    ),
    (
        "RESTful Web API Handbook",
        "This book is an exploration of the Restful web "
        "application-programming interface (API). The book begins by "
        "explaining what the API is, how it is used, and where it is used. The "
        "book then guides you on how to set up the various resources which are "
        "necessary for development in REST.",
        1276,
    ),
    (
        "Building a RESTful Web Service with Spring",
        "Follow best practices and explore techniques such as clustering and "
        "caching to achieve a scalable web service\n"
        "Leverage the Spring Framework to quickly implement RESTful endpoints\n"
        "Learn to implement a client library for a RESTful web service using "
        "the Spring Framework",
        2887,
    ),
)
