from pydantic import BaseModel, Field, field_validator, ConfigDict, model_validator
from typing import List, Optional
from datetime import datetime


class GraphStatistics(BaseModel):
    """
    Summary numbers for a graph matrix.

    Computed on demand by GraphMatrix.statistics(); never stored on the graph.
    """

    vertex_count: int = Field(..., ge=0, description="Number of vertices (N)")
    edge_count: int = Field(..., ge=0, description="Number of non-zero cells")
    density: float = Field(
        default=0.0,
        ge=0.0,
        description="Edge count over N*(N-1); 0.0 for graphs with fewer than two vertices"
    )

    model_config = ConfigDict(
        validate_assignment=True,
        json_schema_extra={
            "example": {
                "vertex_count": 3,
                "edge_count": 2,
                "density": 0.3333
            }
        }
    )


class GraphSnapshot(BaseModel):
    """
    Serializable form of a GraphMatrix.

    Uses Pydantic for cell coercion and JSON round trips. Squareness is
    left to GraphMatrix.load_graph so a bad shape surfaces as InvalidShape.
    """

    name: Optional[str] = Field(default=None, description="Graph name")
    matrix: List[List[int]] = Field(
        default_factory=list,
        description="Row-major adjacency matrix; 0 means no edge"
    )
    created_at: datetime = Field(
        default_factory=datetime.now,
        description="When the graph was created"
    )
    statistics: Optional[GraphStatistics] = Field(
        default=None,
        description="Statistics at the time of the snapshot"
    )

    model_config = ConfigDict(
        validate_assignment=True,
        json_schema_extra={
            "example": {
                "name": "chain",
                "matrix": [[0, 1, 0], [0, 0, 1], [0, 0, 0]],
                "statistics": {"vertex_count": 3, "edge_count": 2, "density": 0.3333}
            }
        }
    )

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Blank names fall back to an auto-generated one."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @model_validator(mode='after')
    def validate_statistics(self):
        """Reject statistics that disagree with the matrix they describe."""
        if self.statistics is None:
            return self

        if self.statistics.vertex_count != len(self.matrix):
            raise ValueError(
                f"statistics.vertex_count={self.statistics.vertex_count} "
                f"but matrix has {len(self.matrix)} rows"
            )

        edges = sum(1 for row in self.matrix for cell in row if cell != 0)
        if self.statistics.edge_count != edges:
            raise ValueError(
                f"statistics.edge_count={self.statistics.edge_count} "
                f"but matrix has {edges} non-zero cells"
            )

        return self
