"""HTTP endpoint catalogue, request routing and OpenAPI document generation."""