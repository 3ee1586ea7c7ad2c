
"""Board helpers: collide, merge, sweep, ghost"""
from typing import Callable, List, Optional
from tetris_piece import Piece, COLS, ROWS

Board = List[List[int]]

def new_board() -> Board:
    return [[0] * COLS for _ in range(ROWS)]

def collide(board: Board, piece: Piece) -> bool:
    for y,row in enumerate(piece.shape):
        for x,v in enumerate(row):
            if not v: continue
            bx,by = piece.x+x, piece.y+y
            if bx<0 or bx>=COLS or by>=ROWS: return True
            if by>=0 and board[by][bx]: return True
    return False

def merge(board:Board, piece:Piece):
    """Write the piece into the board (no collision check)."""
    for y,r in enumerate(piece.shape):
        for x,v in enumerate(r):
            if v:
                by = piece.y+y
                if by>=0: board[by][piece.x+x]=v

def sweep(board:Board, on_clear:Optional[Callable[[int,int,int],None]]=None)->int:
    """Clear full rows bottom-up and return how many went.

    ``on_clear(x, y, value)`` is called for every cell of a full row
    before the row is dropped.
    """
    c=0; y=ROWS-1
    while y>=0:
        if all(board[y][x] for x in range(COLS)):
            if on_clear:
                for x,v in enumerate(board[y]): on_clear(x,y,v)
            del board[y]; board.insert(0,[0]*COLS); c+=1
        else: y-=1
    return c

def ghost_y(board:Board,piece:Piece)->int:
    t=piece
    while not collide(board,t.moved(dy=1)):
        t=t.moved(dy=1)
    return t.y
