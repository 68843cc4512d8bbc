"""Success stories (casos de éxito) published after adoptions"""
